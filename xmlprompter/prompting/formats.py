"""Output encodings supported by the prompt renderers.

Each model in the registry declares one preferred format; callers may
override it per render call. Values are the lowercase wire names used by the
HTTP API and the CLI.
"""

from enum import Enum


class PromptFormat(str, Enum):
    """Prompt output encoding."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"
    PLAIN = "plain"
    YAML = "yaml"
    STRUCTURED = "structured"


FORMAT_PREVIEWS = {
    PromptFormat.XML: "Uses semantic XML tags like <role>, <task>, <context>",
    PromptFormat.JSON: "Structured JSON object with clear key-value pairs",
    PromptFormat.MARKDOWN: "Clean markdown with headers and bullet points",
    PromptFormat.STRUCTURED: "Clear sections with uppercase headers",
    PromptFormat.YAML: "YAML configuration format with nested structure",
    PromptFormat.PLAIN: "Natural language without special formatting",
}


def parse_format(value):
    """Return the `PromptFormat` for `value`, or `None` when unrecognised.

    Accepts enum members and case-insensitive wire names. Blank values are
    treated as "no override".
    """
    if value is None or isinstance(value, PromptFormat):
        return value
    text = str(value).strip().lower()
    if not text:
        return None
    try:
        return PromptFormat(text)
    except ValueError:
        return None


def get_format_preview(fmt) -> str:
    """Return a one-line human description of a prompt format."""
    parsed = parse_format(fmt)
    return FORMAT_PREVIEWS.get(parsed, "Standard prompt format")
