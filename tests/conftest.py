import pytest

from xmlprompter.core.enrichment_types import EnrichmentRequest
from xmlprompter.prompting.prompt_types import FormData


JWT_TEST_SECRET = "unit-test-secret-0123456789abcdef0123456789"


@pytest.fixture
def minimal_form():
    return FormData(role="Engineer", task="Write a function")


@pytest.fixture
def full_form():
    return FormData(
        role="Data Analyst",
        task="Summarise quarterly revenue",
        context="Figures come from the finance export",
        requirements="Use tables\nFlag anomalies",
        style="Concise and neutral",
        output="Markdown report",
    )


@pytest.fixture
def enrichment_request():
    return EnrichmentRequest(
        task="Write a product launch email",
        role="Marketing Specialist",
        context="B2B SaaS audience",
        requirements="Under 200 words",
        style="Friendly",
        output="Plain text email",
        enrichment_level=50,
    )


@pytest.fixture
def jwt_secret(monkeypatch):
    monkeypatch.setattr("xmlprompter.api.auth.JWT_SECRET", JWT_TEST_SECRET)
    return JWT_TEST_SECRET
