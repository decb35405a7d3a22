from unittest.mock import patch

import jwt
import pytest
from fastapi.testclient import TestClient

from xmlprompter.api.http_api import app
from xmlprompter.core.enrichment import EnrichmentUnavailableError
from xmlprompter.core.enrichment_types import EnrichmentResult, FallbackResult
from xmlprompter.prompting.enrichment_levels import ENRICHMENT_INSTRUCTIONS


ENRICH_BODY = {
    "task": "Write a launch email",
    "role": "Marketing Specialist",
    "enrichmentLevel": 60,
}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def enrich_mock():
    with patch("xmlprompter.api.http_api.enrich_prompt") as mock:
        mock.side_effect = lambda request, tier: EnrichmentResult(
            enriched_prompt="<prompt/>",
            improvements=["Added structure"],
            quality_score=8.0,
            processing_time="0.4s",
            tokens_used=99,
            tier=tier,
        )
        yield mock


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["timestamp"].endswith("Z")


def test_enrich_requires_task_and_role(client, enrich_mock):
    response = client.post("/api/prompts/enrich", json={"task": "Only a task"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: task and role are required"}
    enrich_mock.assert_not_called()


def test_enrich_anonymous(client, enrich_mock):
    response = client.post("/api/prompts/enrich", json=ENRICH_BODY)

    assert response.status_code == 200
    assert response.json() == {
        "enrichedPrompt": "<prompt/>",
        "improvements": ["Added structure"],
        "qualityScore": 8.0,
        "isEnriched": True,
        "processingTime": "0.4s",
        "tokensUsed": 99,
        "tier": "anonymous",
    }
    request, tier = enrich_mock.call_args.args
    assert request.enrichment_level == 60
    assert tier == "anonymous"


def test_enrich_declared_pro_tier_requires_authentication(client, enrich_mock, jwt_secret):
    anonymous = client.post("/api/prompts/enrich", json={**ENRICH_BODY, "userTier": "pro"})

    token = jwt.encode({"sub": "user-1"}, jwt_secret, algorithm="HS256")
    authenticated = client.post(
        "/api/prompts/enrich",
        json={**ENRICH_BODY, "userTier": "pro"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert anonymous.status_code == 200
    assert anonymous.json()["tier"] == "anonymous"
    assert authenticated.json()["tier"] == "pro"


@pytest.mark.parametrize("content", [b"not json", b""])
def test_enrich_malformed_body_is_a_bad_request(client, enrich_mock, content):
    response = client.post(
        "/api/prompts/enrich",
        content=content,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: task and role are required"}
    enrich_mock.assert_not_called()


def test_enrich_authenticated_tiers(client, enrich_mock, jwt_secret):
    free_token = jwt.encode({"sub": "user-1"}, jwt_secret, algorithm="HS256")
    pro_token = jwt.encode(
        {"sub": "user-2", "app_metadata": {"subscription_tier": "pro"}},
        jwt_secret,
        algorithm="HS256",
    )

    free = client.post(
        "/api/prompts/enrich", json=ENRICH_BODY, headers={"Authorization": f"Bearer {free_token}"}
    )
    pro = client.post(
        "/api/prompts/enrich", json=ENRICH_BODY, headers={"Authorization": f"Bearer {pro_token}"}
    )
    invalid = client.post(
        "/api/prompts/enrich", json=ENRICH_BODY, headers={"Authorization": "Bearer forged"}
    )

    assert free.json()["tier"] == "free"
    assert pro.json()["tier"] == "pro"
    assert invalid.status_code == 200
    assert invalid.json()["tier"] == "anonymous"


def test_enrich_upstream_failure_returns_fallback(client):
    fallback = FallbackResult(enriched_prompt="<prompt>\n</prompt>")

    with patch(
        "xmlprompter.api.http_api.enrich_prompt",
        side_effect=EnrichmentUnavailableError("OPENAI HTTP ERROR (500)", fallback),
    ):
        response = client.post("/api/prompts/enrich", json=ENRICH_BODY)

    assert response.status_code == 500
    assert response.json() == {
        "error": "Enhancement service temporarily unavailable",
        "fallback": {
            "enrichedPrompt": "<prompt>\n</prompt>",
            "improvements": ["Basic XML structure applied"],
            "qualityScore": 6,
            "isEnriched": False,
        },
    }


def test_generate(client):
    response = client.post(
        "/api/prompts/generate",
        json={"role": "Engineer", "task": "Write a function", "modelId": "claude-3-haiku"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["format"] == "xml"
    assert body["prompt"] == (
        "<prompt>\n  <role>Engineer</role>\n  <task>\n    Write a function\n  </task>\n</prompt>"
    )
    assert body["metadata"]["estimatedTokens"] == 21


def test_generate_with_format_override(client):
    response = client.post(
        "/api/prompts/generate",
        json={"role": "Engineer", "task": "Write", "modelId": "gpt-4o", "format": "yaml"},
    )

    assert response.json()["format"] == "yaml"
    assert response.json()["metadata"]["configurable"] is True


def test_generate_rejects_unknown_or_missing_model(client):
    unknown = client.post("/api/prompts/generate", json={"role": "r", "task": "t", "modelId": "nope"})
    missing = client.post("/api/prompts/generate", json={"role": "r", "task": "t"})

    assert unknown.status_code == 400
    assert unknown.json() == {"error": "Unknown model: nope"}
    assert missing.status_code == 400


def test_validate(client):
    invalid_model = client.post(
        "/api/prompts/validate", json={"role": "x", "modelId": "nonexistent-model"}
    )
    empty = client.post("/api/prompts/validate", json={"modelId": "gpt-4o"})

    assert invalid_model.json() == {"isValid": False, "errors": ["Invalid model selected"]}
    assert empty.json()["errors"] == ["Role is required", "Task description is required"]
    assert empty.json()["recommendedFormat"] == "structured"


def test_models(client):
    body = client.get("/api/models").json()

    assert body["default"] == "claude-3-5-sonnet"
    assert len(body["models"]) == 7


def test_enrichment_instruction(client):
    assert client.get("/api/enrichment/instruction", params={"level": 52}).json() == {
        "level": 52,
        "instruction": ENRICHMENT_INSTRUCTIONS[50],
    }
    assert client.get("/api/enrichment/instruction").json()["instruction"] == ENRICHMENT_INSTRUCTIONS[50]


def test_roles_and_goals(client):
    roles = client.get("/api/roles").json()
    goals = client.get("/api/goals").json()
    goal_roles = client.get("/api/goals/build_software/roles").json()

    assert len(roles["roles"]) == 55
    assert "Technology" in roles["categories"]
    assert len(goals["goals"]) == 12
    assert goal_roles["roles"][0]["id"] == "software_developer"
    assert client.get("/api/goals/unknown/roles").status_code == 404


def test_templates(client):
    marketing = client.get("/api/templates", params={"category": "marketing"}).json()
    searched = client.get("/api/templates", params={"q": "documentation", "tier": "pro"}).json()

    assert {item["category"] for item in marketing["templates"]} == {"marketing"}
    assert [item["id"] for item in searched["templates"]] == ["code-documentation-assistant"]


def test_template_detail(client):
    found = client.get("/api/templates/business-plan-generator")
    missing = client.get("/api/templates/nope")

    assert found.status_code == 200
    assert found.json()["template"]["role"]
    assert missing.status_code == 404
    assert missing.json() == {"error": "Template not found"}


@pytest.mark.parametrize("level", ["nan", "inf", "-inf"])
def test_enrichment_instruction_rejects_non_finite_levels(client, level):
    response = client.get("/api/enrichment/instruction", params={"level": level})

    assert response.status_code == 400
    assert response.json() == {"error": "Enrichment level must be a finite number"}
