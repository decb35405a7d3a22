"""Enrichment-level instruction table and sampling parameters.

The enrichment level is a 0-100 slider value. Two things derive from it:
    - A natural-language instruction telling the enrichment model how much
      creative licence it may take (`generate_enrichment_instruction`).
    - OpenAI-style sampling parameters (`derive_sampling`).

Lookup behavior:
    The table has keys at every multiple of 5. A level resolves to the key
    with the smallest absolute difference. Keys are scanned in ascending
    order and a later key only wins when strictly closer, so exact ties go to
    the lower key (52.5 -> 50).

Determinism:
    Pure functions over static data.
"""

import math
from types import MappingProxyType

DEFAULT_ENRICHMENT_LEVEL = 50

ENRICHMENT_INSTRUCTIONS = MappingProxyType({
    0: "Preserve the original prompt exactly. Only normalize whitespace and structure; do not add, remove or rephrase any content.",
    5: "Keep the original wording. Fix obvious typos and formatting, but do not introduce any new content.",
    10: "Keep the original wording and organize it into clear sections. Add nothing the user did not state.",
    15: "Stay very close to the original. Clarify ambiguous phrasing with minimal edits and no new requirements.",
    20: "Make light clarity edits. Tighten sentences and make implicit structure explicit without adding new ideas.",
    25: "Improve clarity and ordering. You may make implied constraints explicit when they are clearly intended.",
    30: "Refine wording for precision. Add brief clarifications where the intent is obvious from the original.",
    35: "Clarify the task and context. Add short, directly relevant details that follow from what the user wrote.",
    40: "Improve structure and specificity. Suggest a concrete output shape if the original leaves it open.",
    45: "Balance fidelity and improvement. Add relevant context and make success criteria explicit.",
    50: "Moderately enhance the prompt. Add relevant context, explicit requirements and a clear output format while keeping the user's intent intact.",
    55: "Enhance the prompt with useful detail. Add reasonable assumptions and label them as such.",
    60: "Expand the prompt with domain-appropriate best practices, constraints and quality criteria.",
    65: "Expand requirements and context substantially. Include edge cases the user is likely to care about.",
    70: "Take notable latitude. Add examples, evaluation criteria and step-by-step guidance where helpful.",
    75: "Elaborate freely on approach and structure. Introduce expert techniques suited to the task.",
    80: "Substantially enrich the prompt. Propose alternative angles and richer output specifications.",
    85: "Take broad creative licence. Reframe the task for maximum effectiveness while honouring its goal.",
    90: "Treat the original as a brief. Build a comprehensive, expert-level prompt around its core goal.",
    95: "Use extensive creative licence. Add scenarios, examples, constraints and stretch goals as you see fit.",
    100: "Maximum creativity. Reimagine the prompt entirely around the user's underlying goal, adding whatever makes it exceptional.",
})

# Token caps per subscription tier.
PLAN_CAP_DEFAULT = 800
PLAN_CAP_PRO = 2000
PRO_TIERS = ("pro", "enterprise")


def generate_enrichment_instruction(level=DEFAULT_ENRICHMENT_LEVEL) -> str:
    """Return the instruction for the table key nearest to `level`.

    Args:
        level: Enrichment level, nominally 0-100. `None` uses the default.

    Returns:
        Instruction string. Exact ties resolve to the lower key.
    """
    if level is None:
        level = DEFAULT_ENRICHMENT_LEVEL

    keys = sorted(ENRICHMENT_INSTRUCTIONS)
    closest = keys[0]
    for key in keys[1:]:
        if abs(key - level) < abs(closest - level):
            closest = key

    return ENRICHMENT_INSTRUCTIONS[closest]


def clamp(value, minimum, maximum):
    return max(minimum, min(maximum, value))


def _round2(value: float) -> float:
    # Half-up rounding to two decimals.
    return math.floor(value * 100 + 0.5) / 100


def get_plan_cap(tier) -> int:
    """Return the completion token cap for a subscription tier."""
    return PLAN_CAP_PRO if tier in PRO_TIERS else PLAN_CAP_DEFAULT


def derive_sampling(level, plan_cap: int) -> dict:
    """Derive sampling parameters from an enrichment level.

    Higher levels raise temperature, nucleus mass and presence penalty and
    lower frequency penalty. Values are clamped to OpenAI's accepted ranges.

    Args:
        level: Enrichment level; clamped to 0-100.
        plan_cap: Maximum completion tokens allowed for the caller's plan.

    Returns:
        Dict with `temperature`, `top_p`, `presence_penalty`,
        `frequency_penalty` and `max_tokens`.
    """
    e = clamp(level, 0, 100) / 100

    temperature = clamp(_round2(1.1 * e), 0, 2)
    top_p = clamp(_round2(0.1 + 0.9 * e), 0, 1)
    presence_penalty = clamp(_round2(-0.6 + 1.6 * e), -2, 2)
    frequency_penalty = clamp(_round2(0.4 * (1 - e)), -2, 2)
    max_tokens = math.floor(clamp(64 + (plan_cap - 64) * e, 64, plan_cap))

    return {
        "temperature": temperature,
        "top_p": top_p,
        "presence_penalty": presence_penalty,
        "frequency_penalty": frequency_penalty,
        "max_tokens": max_tokens,
    }
