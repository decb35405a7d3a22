"""Static registry of supported target models.

Architectural role:
    Supplies the model descriptors consumed by the renderers (format choice,
    feature flags, best-practice guidance) and by the validator (token limit,
    maximum complexity).

Data lifecycle:
    Descriptors are frozen dataclasses built once at import time. Nothing in
    this module mutates them; lookups return the shared instances.

Lookup behavior:
    `get_model_by_id` returns `None` for unknown ids. Callers decide whether
    that is a hard failure (`generator.generate_prompt`) or a soft one
    (`validator.validate_prompt`).
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from xmlprompter.prompting.formats import PromptFormat


# =========================================================
# MODEL CATEGORIES
# =========================================================

CATEGORY_CLAUDE = "claude"
CATEGORY_OPENAI = "openai"
CATEGORY_GOOGLE = "google"
CATEGORY_MISTRAL = "mistral"
CATEGORY_META = "meta"


@dataclass(frozen=True)
class PromptGuidelines:
    """Prompt-writing guidance attached to a model.

    Attributes:
        use_xml_tags: Model responds well to XML-tagged sections.
        prefer_structured: Model prefers sectioned over free-form prompts.
        supports_thinking: Model benefits from an explicit thinking block.
        max_complexity: Highest complexity class the model handles well
            (`low`, `medium` or `high`).
        best_practices: Ordered guidance strings rendered into prompts.
    """

    use_xml_tags: bool
    prefer_structured: bool
    supports_thinking: bool
    max_complexity: str
    best_practices: tuple = ()


@dataclass(frozen=True)
class ModelDescriptor:
    """Immutable description of one target model."""

    id: str
    name: str
    provider: str
    category: str
    description: str
    preferred_format: PromptFormat
    prompt_guidelines: PromptGuidelines
    alternative_formats: tuple = ()
    features: tuple = ()
    capabilities: Mapping = field(default_factory=dict)
    pricing: Mapping = field(default_factory=dict)
    max_tokens: int | None = None
    context_window: int | None = None

    def has_feature(self, feature: str) -> bool:
        return feature in self.features

    def excellent_capabilities(self) -> list[str]:
        """Capability names rated `excellent`, in declaration order."""
        return [name for name, rating in self.capabilities.items() if rating == "excellent"]

    def to_summary(self) -> dict:
        """JSON-friendly summary used by the HTTP and CLI listings."""
        return {
            "id": self.id,
            "name": self.name,
            "provider": self.provider,
            "category": self.category,
            "description": self.description,
            "preferredFormat": self.preferred_format.value,
            "alternativeFormats": [fmt.value for fmt in self.alternative_formats],
            "maxTokens": self.max_tokens,
            "contextWindow": self.context_window,
            "features": list(self.features),
            "capabilities": dict(self.capabilities),
            "pricing": dict(self.pricing),
            "supportsThinking": self.prompt_guidelines.supports_thinking,
            "maxComplexity": self.prompt_guidelines.max_complexity,
        }


def _model(**kwargs) -> ModelDescriptor:
    kwargs["capabilities"] = MappingProxyType(dict(kwargs.get("capabilities", {})))
    kwargs["pricing"] = MappingProxyType(dict(kwargs.get("pricing", {})))
    return ModelDescriptor(**kwargs)


# =========================================================
# REGISTRY
# =========================================================
# Pricing is USD per 1M tokens.

_MODELS = (
    _model(
        id="claude-3-5-sonnet",
        name="Claude 3.5 Sonnet",
        provider="Anthropic",
        category=CATEGORY_CLAUDE,
        description="Most capable Claude model for complex reasoning and analysis",
        preferred_format=PromptFormat.XML,
        alternative_formats=(PromptFormat.MARKDOWN, PromptFormat.STRUCTURED),
        max_tokens=200000,
        context_window=200000,
        capabilities={
            "reasoning": "excellent",
            "coding": "excellent",
            "analysis": "excellent",
            "creative": "excellent",
            "multimodal": True,
        },
        pricing={"input": 3.00, "output": 15.00},
        features=("xml_tags", "thinking_tags", "artifacts", "vision"),
        prompt_guidelines=PromptGuidelines(
            use_xml_tags=True,
            prefer_structured=True,
            supports_thinking=True,
            max_complexity="high",
            best_practices=(
                "Use clear XML structure with semantic tags",
                "Leverage thinking tags for complex reasoning",
                "Be explicit about desired output format",
                "Use examples when helpful",
            ),
        ),
    ),
    _model(
        id="claude-3-haiku",
        name="Claude 3 Haiku",
        provider="Anthropic",
        category=CATEGORY_CLAUDE,
        description="Fast and efficient Claude model for quick tasks",
        preferred_format=PromptFormat.XML,
        alternative_formats=(PromptFormat.MARKDOWN, PromptFormat.PLAIN),
        max_tokens=200000,
        context_window=200000,
        capabilities={
            "reasoning": "good",
            "coding": "good",
            "analysis": "good",
            "creative": "good",
            "multimodal": True,
        },
        pricing={"input": 0.25, "output": 1.25},
        features=("xml_tags", "vision"),
        prompt_guidelines=PromptGuidelines(
            use_xml_tags=True,
            prefer_structured=True,
            supports_thinking=False,
            max_complexity="medium",
            best_practices=(
                "Keep prompts concise and focused",
                "Use simple XML structure",
                "Avoid overly complex instructions",
            ),
        ),
    ),
    _model(
        id="gpt-4o",
        name="GPT-4o",
        provider="OpenAI",
        category=CATEGORY_OPENAI,
        description="OpenAI's most advanced multimodal model",
        preferred_format=PromptFormat.STRUCTURED,
        alternative_formats=(PromptFormat.MARKDOWN, PromptFormat.JSON),
        max_tokens=128000,
        context_window=128000,
        capabilities={
            "reasoning": "excellent",
            "coding": "excellent",
            "analysis": "excellent",
            "creative": "excellent",
            "multimodal": True,
        },
        pricing={"input": 2.50, "output": 10.00},
        features=("function_calling", "json_mode", "vision", "audio"),
        prompt_guidelines=PromptGuidelines(
            use_xml_tags=False,
            prefer_structured=True,
            supports_thinking=False,
            max_complexity="high",
            best_practices=(
                "Use clear section headers and bullet points",
                "Leverage system/user message separation",
                "Be specific about output format requirements",
                "Use examples and few-shot learning",
            ),
        ),
    ),
    _model(
        id="gpt-4o-mini",
        name="GPT-4o Mini",
        provider="OpenAI",
        category=CATEGORY_OPENAI,
        description="Efficient and cost-effective GPT-4 model",
        preferred_format=PromptFormat.STRUCTURED,
        alternative_formats=(PromptFormat.MARKDOWN, PromptFormat.PLAIN),
        max_tokens=128000,
        context_window=128000,
        capabilities={
            "reasoning": "good",
            "coding": "good",
            "analysis": "good",
            "creative": "good",
            "multimodal": True,
        },
        pricing={"input": 0.15, "output": 0.60},
        features=("function_calling", "json_mode", "vision"),
        prompt_guidelines=PromptGuidelines(
            use_xml_tags=False,
            prefer_structured=True,
            supports_thinking=False,
            max_complexity="medium",
            best_practices=(
                "Keep instructions clear and concise",
                "Use structured format with headers",
                "Avoid overly complex reasoning chains",
            ),
        ),
    ),
    _model(
        id="gemini-1.5-pro",
        name="Gemini 1.5 Pro",
        provider="Google",
        category=CATEGORY_GOOGLE,
        description="Google's most capable multimodal model",
        preferred_format=PromptFormat.MARKDOWN,
        alternative_formats=(PromptFormat.STRUCTURED, PromptFormat.JSON),
        max_tokens=2000000,
        context_window=2000000,
        capabilities={
            "reasoning": "excellent",
            "coding": "excellent",
            "analysis": "excellent",
            "creative": "good",
            "multimodal": True,
        },
        pricing={"input": 1.25, "output": 5.00},
        features=("function_calling", "code_execution", "vision", "audio", "video"),
        prompt_guidelines=PromptGuidelines(
            use_xml_tags=False,
            prefer_structured=False,
            supports_thinking=False,
            max_complexity="high",
            best_practices=(
                "Use markdown formatting for structure",
                "Leverage large context window for examples",
                "Be explicit about reasoning steps",
                "Use clear headings and organization",
            ),
        ),
    ),
    _model(
        id="mistral-large",
        name="Mistral Large",
        provider="Mistral AI",
        category=CATEGORY_MISTRAL,
        description="Mistral's most capable model for complex tasks",
        preferred_format=PromptFormat.STRUCTURED,
        alternative_formats=(PromptFormat.MARKDOWN, PromptFormat.JSON),
        max_tokens=128000,
        context_window=128000,
        capabilities={
            "reasoning": "excellent",
            "coding": "excellent",
            "analysis": "excellent",
            "creative": "good",
            "multimodal": False,
        },
        pricing={"input": 2.00, "output": 6.00},
        features=("function_calling", "json_mode"),
        prompt_guidelines=PromptGuidelines(
            use_xml_tags=False,
            prefer_structured=True,
            supports_thinking=False,
            max_complexity="high",
            best_practices=(
                "Use clear instruction structure",
                "Provide context before the task",
                "Be explicit about expected output",
                "Use examples when beneficial",
            ),
        ),
    ),
    _model(
        id="llama-3.1-405b",
        name="Llama 3.1 405B",
        provider="Meta",
        category=CATEGORY_META,
        description="Meta's largest open-source model",
        preferred_format=PromptFormat.PLAIN,
        alternative_formats=(PromptFormat.MARKDOWN, PromptFormat.STRUCTURED),
        max_tokens=128000,
        context_window=128000,
        capabilities={
            "reasoning": "excellent",
            "coding": "excellent",
            "analysis": "good",
            "creative": "good",
            "multimodal": False,
        },
        pricing={"input": 1.00, "output": 3.00},
        features=("function_calling",),
        prompt_guidelines=PromptGuidelines(
            use_xml_tags=False,
            prefer_structured=False,
            supports_thinking=False,
            max_complexity="high",
            best_practices=(
                "Use natural language instructions",
                "Be direct and specific",
                "Avoid overly complex formatting",
                "Focus on clear task description",
            ),
        ),
    ),
)

AI_MODELS = MappingProxyType({model.id: model for model in _MODELS})

DEFAULT_MODEL = "claude-3-5-sonnet"


# =========================================================
# LOOKUP HELPERS
# =========================================================

def get_model_by_id(model_id):
    """Return the descriptor for `model_id`, or `None` when unknown."""
    if not isinstance(model_id, str):
        return None
    return AI_MODELS.get(model_id)


def list_models() -> list[ModelDescriptor]:
    return list(AI_MODELS.values())


def get_models_by_provider(provider: str) -> list[ModelDescriptor]:
    return [model for model in AI_MODELS.values() if model.provider == provider]


def get_models_by_category(category: str) -> list[ModelDescriptor]:
    return [model for model in AI_MODELS.values() if model.category == category]


def get_all_providers() -> list[str]:
    """Return provider names in registry order without duplicates."""
    providers: list[str] = []
    for model in AI_MODELS.values():
        if model.provider not in providers:
            providers.append(model.provider)
    return providers


def get_model_capabilities(model_id):
    model = get_model_by_id(model_id)
    return dict(model.capabilities) if model else None


def get_optimal_format(model_id) -> PromptFormat:
    """Return the preferred format of a model, `PLAIN` for unknown ids."""
    model = get_model_by_id(model_id)
    return model.preferred_format if model else PromptFormat.PLAIN


def get_model_pricing(model_id):
    model = get_model_by_id(model_id)
    return dict(model.pricing) if model else None


def estimate_token_cost(model_id, input_tokens: int, output_tokens: int):
    """Estimate USD cost of a call from per-1M-token pricing.

    Returns:
        Dict with `input_cost`, `output_cost`, `total_cost`, or `None` when
        the model is unknown.
    """
    pricing = get_model_pricing(model_id)
    if not pricing:
        return None

    input_cost = (input_tokens / 1_000_000) * pricing["input"]
    output_cost = (output_tokens / 1_000_000) * pricing["output"]

    return {
        "input_cost": input_cost,
        "output_cost": output_cost,
        "total_cost": input_cost + output_cost,
    }
