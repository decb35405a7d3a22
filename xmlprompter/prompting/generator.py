"""Entry point for rendering a prompt for a given target model.

Control flow:
    model id -> registry lookup -> format selection (override or preferred)
    -> renderer dispatch -> `RenderResult`.

Failure handling:
    An unknown model id raises `ConfigurationError`; it is not caught here.
    An unrecognised format override falls back to the Structured renderer.
"""

from xmlprompter.prompting.formats import PromptFormat, parse_format
from xmlprompter.prompting.model_registry import get_model_by_id
from xmlprompter.prompting.prompt_types import FormData, RenderResult
from xmlprompter.prompting.renderers import RENDERERS, render_structured


class ConfigurationError(ValueError):
    """Raised when a render call references an unknown model."""


def resolve_format(fmt, model) -> PromptFormat:
    """Return the format to render with.

    `None` or blank selects the model's preferred format. Any other value that
    is not a known format resolves to Structured.
    """
    if fmt is None or (isinstance(fmt, str) and not fmt.strip()):
        return model.preferred_format
    return parse_format(fmt) or PromptFormat.STRUCTURED


def generate_prompt(form_data, model_id: str, format=None) -> RenderResult:
    """Render `form_data` for `model_id`.

    Args:
        form_data: `FormData` or any mapping with the form field names.
        model_id: Registry id of the target model.
        format: Optional `PromptFormat` or wire name overriding the model's
            preferred format.

    Returns:
        `RenderResult` with the prompt, its format and metadata.

    Raises:
        ConfigurationError: If `model_id` is not in the registry.
    """
    model = get_model_by_id(model_id)
    if model is None:
        raise ConfigurationError(f"Unknown model: {model_id}")

    form = FormData.coerce(form_data)
    renderer = RENDERERS.get(resolve_format(format, model), render_structured)

    return renderer(form, model.prompt_guidelines, model)
