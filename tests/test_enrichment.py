from unittest.mock import patch

import pytest

from xmlprompter.core.enrichment import (
    EnrichmentUnavailableError,
    build_messages,
    build_sampling,
    enrich_prompt,
    parse_enrichment_response,
)
from xmlprompter.core.enrichment_types import EnrichmentRequest
from xmlprompter.llm.client import CompletionResult, LLMRequestError
from xmlprompter.prompting.prompt_builder import SYSTEM_MESSAGE, generate_fallback_prompt


MODEL_RESPONSE = (
    "ENHANCED_PROMPT:\n"
    "<prompt>\n"
    "  <role>Marketing Specialist</role>\n"
    "\n"
    "</prompt>\n"
    "\n"
    "IMPROVEMENTS:\n"
    "- Added structure\n"
    "- Clarified audience\n"
    "\n"
    "QUALITY_SCORE: 9"
)


def test_parse_sectioned_response():
    parsed = parse_enrichment_response(MODEL_RESPONSE, is_pro=False)

    assert parsed == {
        "enriched_prompt": "<prompt>\n  <role>Marketing Specialist</role>\n</prompt>",
        "improvements": ["Added structure", "Clarified audience"],
        "quality_score": 9.0,
    }


def test_parse_fractional_score():
    parsed = parse_enrichment_response("ENHANCED_PROMPT:\nx\nQUALITY_SCORE: 8.5/10", is_pro=False)

    assert parsed["quality_score"] == 8.5


def test_parse_unsectioned_response_uses_whole_content():
    parsed = parse_enrichment_response("  just a prompt  ", is_pro=True)

    assert parsed == {
        "enriched_prompt": "just a prompt",
        "improvements": ["Enhanced with AI optimization"],
        "quality_score": 8.5,
    }


def test_sampling_respects_plan_cap(enrichment_request):
    messages = build_messages(enrichment_request, "free")

    sampling = build_sampling(messages, 100, "free")

    assert "top_p" not in sampling
    assert sampling["max_tokens"] == 800
    assert sampling["temperature"] == pytest.approx(1.1)
    assert build_sampling(messages, 100, "pro")["max_tokens"] == 2000


def test_sampling_floor_for_large_inputs():
    request = EnrichmentRequest(task="word " * 6000, role="Writer")
    messages = build_messages(request, "pro")

    assert build_sampling(messages, 50, "pro")["max_tokens"] == 256


def test_messages_start_with_system(enrichment_request):
    messages = build_messages(enrichment_request, "pro")

    assert messages[0] == {"role": "system", "content": SYSTEM_MESSAGE}
    assert messages[1]["role"] == "user"


@patch("xmlprompter.core.enrichment.generate_answer")
def test_enrich_prompt_success(mock_generate, enrichment_request):
    mock_generate.return_value = CompletionResult(text=MODEL_RESPONSE, total_tokens=321)

    result = enrich_prompt(enrichment_request, "pro")

    assert result.is_enriched is True
    assert result.tokens_used == 321
    assert result.tier == "pro"
    assert result.quality_score == 9.0
    assert result.processing_time.endswith("s")

    messages, sampling = mock_generate.call_args.args
    assert messages[0]["role"] == "system"
    assert sampling["max_tokens"] == 2000

    payload = result.to_dict()
    assert payload["enrichedPrompt"].startswith("<prompt>")
    assert payload["isEnriched"] is True


@patch("xmlprompter.core.enrichment.generate_answer")
def test_enrich_prompt_failure_carries_fallback(mock_generate, enrichment_request):
    mock_generate.side_effect = LLMRequestError("OPENAI HTTP ERROR (503)")

    with pytest.raises(EnrichmentUnavailableError) as exc:
        enrich_prompt(enrichment_request, "free")

    fallback = exc.value.fallback
    assert fallback.enriched_prompt == generate_fallback_prompt(enrichment_request)
    assert fallback.to_dict() == {
        "enrichedPrompt": generate_fallback_prompt(enrichment_request),
        "improvements": ["Basic XML structure applied"],
        "qualityScore": 6,
        "isEnriched": False,
    }
    assert isinstance(exc.value.__cause__, LLMRequestError)


def test_request_from_payload_coerces_level():
    request = EnrichmentRequest.from_payload(
        {"task": "t", "role": "r", "userTier": "pro", "enrichmentLevel": "250"}
    )

    assert request.user_tier == "pro"
    assert request.enrichment_level == 100
    assert EnrichmentRequest.from_payload({"enrichmentLevel": "high"}).enrichment_level == 50
    assert EnrichmentRequest.from_payload({"enrichmentLevel": True}).enrichment_level == 50
    assert EnrichmentRequest.from_payload({"enrichmentLevel": 37.5}).enrichment_level == 37.5


def test_missing_required():
    assert EnrichmentRequest(task="t").missing_required() is True
    assert EnrichmentRequest(task="t", role="").missing_required() is True
    assert EnrichmentRequest(task="t", role="r").missing_required() is False
