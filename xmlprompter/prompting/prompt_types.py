"""Data contracts shared by the renderers, validator and API adapters.

`FormData` is the caller-owned input record. `RenderResult` and
`ValidationResult` are the ephemeral outputs; both expose `to_dict()` producing
the camelCase shape returned over HTTP.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from xmlprompter.prompting.formats import PromptFormat


@dataclass(frozen=True)
class FormData:
    """User-supplied prompt fields.

    Attributes:
        role: Persona the model should adopt. Required for validity.
        task: What the model should do. Required for validity.
        context: Background information.
        requirements: Constraints, often one per line.
        style: Tone and style guidance.
        output: Desired output format.

    Empty strings and `None` are both treated as "not provided" by every
    renderer.
    """

    role: str | None = None
    task: str | None = None
    context: str | None = None
    requirements: str | None = None
    style: str | None = None
    output: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "FormData":
        """Build a `FormData` from a mapping, ignoring unknown keys.

        Non-string values are converted with `str()`; `None` stays `None`.
        """
        if data is None:
            return cls()
        values = {}
        for item in fields(cls):
            value = data.get(item.name)
            values[item.name] = None if value is None else str(value)
        return cls(**values)

    @classmethod
    def coerce(cls, data) -> "FormData":
        if isinstance(data, cls):
            return data
        return cls.from_mapping(data)

    def to_dict(self) -> dict:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass
class RenderResult:
    """Rendered prompt plus lightweight metadata."""

    prompt: str
    format: PromptFormat
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "prompt": self.prompt,
            "format": self.format.value,
            "metadata": dict(self.metadata),
        }


@dataclass
class ValidationResult:
    """Outcome of `validate_prompt`.

    For an unknown model only `is_valid` and `errors` are populated; the
    remaining attributes stay `None` and are omitted from `to_dict()`.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] | None = None
    complexity: str | None = None
    recommended_format: PromptFormat | None = None

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"isValid": self.is_valid, "errors": list(self.errors)}
        if self.warnings is not None:
            payload["warnings"] = list(self.warnings)
        if self.complexity is not None:
            payload["complexity"] = self.complexity
        if self.recommended_format is not None:
            payload["recommendedFormat"] = self.recommended_format.value
        return payload
