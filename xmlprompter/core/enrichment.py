"""Enrichment pipeline: prompt construction, model call, parsing and fallback.

Architectural role:
    Provides the execution pipeline used by the HTTP adapter to turn one
    enrichment request into an enhanced XML prompt.

Control-flow model:
    1. Build the enrichment user message for the caller's tier.
    2. Derive sampling parameters from the enrichment level and budget
       `max_tokens` against the plan cap.
    3. Invoke the LLM adapter once.
    4. Parse the sectioned response into prompt, improvements and score.

Error handling strategy:
    Any upstream failure is logged and re-raised as
    `EnrichmentUnavailableError` carrying a deterministic fallback result.
    There is no retry and no distinction between transient and permanent
    failures.

Determinism:
    Payload construction and parsing are deterministic for fixed inputs.
    Model output and processing time are not.
"""

import logging
import re
import time

from xmlprompter.core.enrichment_types import EnrichmentResult, FallbackResult
from xmlprompter.llm.service import generate_answer
from xmlprompter.prompting.enrichment_levels import clamp, derive_sampling, get_plan_cap
from xmlprompter.prompting.prompt_builder import (
    SYSTEM_MESSAGE,
    build_enrichment_prompt,
    generate_fallback_prompt,
)
from xmlprompter.prompting.tokens import count_chat_payload_tokens


logger = logging.getLogger(__name__)

# Input estimate + max_tokens must stay within this window.
TOKEN_WINDOW = 5000
MIN_COMPLETION_TOKENS = 256

DEFAULT_QUALITY_PRO = 8.5
DEFAULT_QUALITY = 7.0

_SCORE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")


class EnrichmentUnavailableError(RuntimeError):
    """Raised when the enrichment model could not be used.

    Attributes:
        fallback: `FallbackResult` the caller should return instead.
    """

    def __init__(self, message: str, fallback: FallbackResult):
        super().__init__(message)
        self.fallback = fallback


def build_messages(request, tier: str) -> list[dict]:
    return [
        {"role": "system", "content": SYSTEM_MESSAGE},
        {"role": "user", "content": build_enrichment_prompt(request, tier)},
    ]


def build_sampling(messages, level, tier: str) -> dict:
    """Return sampling parameters for an enrichment call.

    Temperature is preferred over `top_p`, so `top_p` is dropped. `max_tokens`
    is the remaining headroom in `TOKEN_WINDOW`, floored at
    `MIN_COMPLETION_TOKENS` and capped by the tier's plan cap.
    """
    plan_cap = get_plan_cap(tier)
    sampling = derive_sampling(level, plan_cap)
    sampling.pop("top_p", None)

    headroom = max(MIN_COMPLETION_TOKENS, TOKEN_WINDOW - count_chat_payload_tokens(messages))
    sampling["max_tokens"] = clamp(headroom, MIN_COMPLETION_TOKENS, plan_cap)
    return sampling


def parse_enrichment_response(content: str, is_pro: bool) -> dict:
    """Split a sectioned model response into its parts.

    Expected layout (see `prompt_builder.RESPONSE_LAYOUT`):
        `ENHANCED_PROMPT:` followed by prompt lines, `IMPROVEMENTS:` followed
        by `-` bullets, and a `QUALITY_SCORE:` line.

    Returns:
        Dict with `enriched_prompt`, `improvements`, `quality_score`.

    Edge cases:
        - Blank lines inside the prompt section are dropped.
        - Missing score keeps the tier default (8.5 pro, 7.0 otherwise).
        - A response without an `ENHANCED_PROMPT:` section is returned
          whole as the prompt.
    """
    enriched_lines: list[str] = []
    improvements: list[str] = []
    quality_score = DEFAULT_QUALITY_PRO if is_pro else DEFAULT_QUALITY
    section = ""

    for line in content.split("\n"):
        if "ENHANCED_PROMPT:" in line:
            section = "prompt"
            continue
        if "IMPROVEMENTS:" in line:
            section = "improvements"
            continue
        if "QUALITY_SCORE:" in line:
            match = _SCORE_PATTERN.search(line)
            if match:
                quality_score = float(match.group(1))
            continue

        if section == "prompt" and line.strip():
            enriched_lines.append(line)
        elif section == "improvements" and line.strip().startswith("-"):
            improvements.append(line.strip()[1:].strip())

    enriched_prompt = "\n".join(enriched_lines).strip()
    if not enriched_prompt:
        enriched_prompt = content.strip()
        if not improvements:
            improvements = ["Enhanced with AI optimization"]

    return {
        "enriched_prompt": enriched_prompt,
        "improvements": improvements,
        "quality_score": quality_score,
    }


def build_fallback(request) -> FallbackResult:
    return FallbackResult(enriched_prompt=generate_fallback_prompt(request))


def enrich_prompt(request, tier: str) -> EnrichmentResult:
    """Enrich one prompt through the configured LLM.

    Args:
        request: Validated `EnrichmentRequest` (task and role present).
        tier: Resolved caller tier.

    Returns:
        `EnrichmentResult` with `is_enriched=True`.

    Raises:
        EnrichmentUnavailableError: On any failure of the model call or
            response handling. Carries the fallback result.
    """
    logger.info(
        "Prompt enrichment request tier=%s task_length=%d has_context=%s level=%s",
        tier,
        len(request.task or ""),
        bool(request.context),
        request.enrichment_level,
    )

    start = time.time()
    try:
        messages = build_messages(request, tier)
        sampling = build_sampling(messages, request.enrichment_level, tier)
        completion = generate_answer(messages, sampling)
        parsed = parse_enrichment_response(completion.text, tier == "pro")
    except Exception as err:
        logger.exception("Prompt enrichment failed")
        raise EnrichmentUnavailableError(str(err), build_fallback(request)) from err

    elapsed = time.time() - start

    logger.info(
        "Prompt enrichment completed tier=%s tokens=%d elapsed=%.2fs",
        tier,
        completion.total_tokens,
        elapsed,
    )

    return EnrichmentResult(
        enriched_prompt=parsed["enriched_prompt"],
        improvements=parsed["improvements"],
        quality_score=parsed["quality_score"],
        is_enriched=True,
        processing_time=f"{elapsed:.1f}s",
        tokens_used=completion.total_tokens,
        tier=tier,
    )
