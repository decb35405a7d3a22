"""Enrichment request/result data contracts for `xmlprompter.core.enrichment`.

Architectural role:
    Defines the shapes exchanged between the HTTP adapter and the enrichment
    pipeline. Wire names are camelCase; attributes are snake_case.

Determinism:
    The data classes are purely structural and state-free.
"""

from dataclasses import dataclass, field

from xmlprompter.prompting.enrichment_levels import DEFAULT_ENRICHMENT_LEVEL


def _text(value):
    if value is None:
        return None
    return str(value)


def _level(value) -> float:
    """Coerce a wire enrichment level to a number in 0-100."""
    if value is None or isinstance(value, bool):
        return DEFAULT_ENRICHMENT_LEVEL
    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_ENRICHMENT_LEVEL
    if number != number:  # NaN
        return DEFAULT_ENRICHMENT_LEVEL
    number = max(0.0, min(100.0, number))
    return int(number) if number.is_integer() else number


@dataclass
class EnrichmentRequest:
    """Fields submitted to `POST /api/prompts/enrich`.

    Attributes:
        task: Task description. Required.
        role: Persona. Required.
        context: Optional background.
        requirements: Optional constraints.
        style: Optional style guidance (forwarded for pro only).
        output: Optional output format (forwarded for pro only).
        user_tier: Tier declared by the client; `"pro"` is honoured as-is.
        enrichment_level: 0-100 slider value.
    """

    task: str | None = None
    role: str | None = None
    context: str | None = None
    requirements: str | None = None
    style: str | None = None
    output: str | None = None
    user_tier: str | None = None
    enrichment_level: float = DEFAULT_ENRICHMENT_LEVEL

    @classmethod
    def from_payload(cls, body) -> "EnrichmentRequest":
        body = body or {}
        return cls(
            task=_text(body.get("task")),
            role=_text(body.get("role")),
            context=_text(body.get("context")),
            requirements=_text(body.get("requirements")),
            style=_text(body.get("style")),
            output=_text(body.get("output")),
            user_tier=_text(body.get("userTier")),
            enrichment_level=_level(body.get("enrichmentLevel")),
        )

    def missing_required(self) -> bool:
        return not self.task or not self.role


@dataclass
class EnrichmentResult:
    """Successful enrichment response body."""

    enriched_prompt: str
    improvements: list[str] = field(default_factory=list)
    quality_score: float = 0.0
    is_enriched: bool = True
    processing_time: str = "0.0s"
    tokens_used: int = 0
    tier: str = "anonymous"

    def to_dict(self) -> dict:
        return {
            "enrichedPrompt": self.enriched_prompt,
            "improvements": list(self.improvements),
            "qualityScore": self.quality_score,
            "isEnriched": self.is_enriched,
            "processingTime": self.processing_time,
            "tokensUsed": self.tokens_used,
            "tier": self.tier,
        }


@dataclass
class FallbackResult:
    """Deterministic result returned alongside an upstream failure."""

    enriched_prompt: str
    improvements: list[str] = field(default_factory=lambda: ["Basic XML structure applied"])
    quality_score: float = 6
    is_enriched: bool = False

    def to_dict(self) -> dict:
        return {
            "enrichedPrompt": self.enriched_prompt,
            "improvements": list(self.improvements),
            "qualityScore": self.quality_score,
            "isEnriched": self.is_enriched,
        }
