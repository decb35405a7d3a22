"""Format renderers turning a `FormData` record into a model-specific prompt.

Design constraints:
    - One pure function per output format, all sharing the signature
      `(form, guidelines, model) -> RenderResult`.
    - Deterministic output for identical inputs; no clock or randomness.
    - Fixed section ordering: role, task, context, requirements, style,
      output, then model guidance.

Empty-field policy:
    A field that is `None` or empty is omitted entirely, never rendered as an
    empty tag or section. Two exceptions:
        - Structured falls back to `Assistant` when no role is given.
        - XML only emits `<style>` when the model has the `xml_tags` feature.

Prompt safety model:
    Field values are interpolated verbatim. XML and YAML quoting is
    presentational, not a sanitization layer.
"""

import json

from xmlprompter.prompting.formats import PromptFormat
from xmlprompter.prompting.prompt_types import RenderResult
from xmlprompter.prompting.tokens import estimate_tokens


THINKING_BLOCK = (
    "<thinking>\n"
    "I need to approach this task systematically, considering the role, context, and requirements.\n"
    "</thinking>\n\n"
)

BLOCK_INDENT = "    "
BULLET_PREFIXES = ("•", "-", "*")


# =========================================================
# TEXT HELPERS
# =========================================================

def format_multiline_content(content: str, indent: str = "") -> str:
    """Re-indent multi-line text.

    Every line is trimmed and prefixed with `indent`, then the whole block is
    trimmed, so the first line carries no indent of its own.
    """
    return "\n".join(indent + line.strip() for line in content.split("\n")).strip()


def format_as_bullet_points(content: str) -> str:
    """Render non-blank lines as `•` bullets, keeping existing bullet markers."""
    bullets = []
    for line in content.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        if trimmed.startswith(BULLET_PREFIXES):
            bullets.append(trimmed)
        else:
            bullets.append(f"• {trimmed}")
    return "\n".join(bullets)


def escape_yaml(value: str) -> str:
    """Escape a value for a double-quoted YAML scalar on one line."""
    return value.replace('"', '\\"').replace("\n", "\\n")


def _result(prompt: str, fmt: PromptFormat, **flags) -> RenderResult:
    metadata = {"modelOptimized": True}
    metadata.update(flags)
    metadata["estimatedTokens"] = estimate_tokens(prompt)
    return RenderResult(prompt=prompt, format=fmt, metadata=metadata)


def _xml_block(tag: str, value: str) -> str:
    return f"  <{tag}>\n{BLOCK_INDENT}{format_multiline_content(value, BLOCK_INDENT)}\n  </{tag}>\n"


# =========================================================
# XML
# =========================================================

def render_xml(form, guidelines, model) -> RenderResult:
    """Render semantic XML, optionally preceded by a thinking block."""
    parts = []

    if guidelines.supports_thinking and model.has_feature("thinking_tags"):
        parts.append(THINKING_BLOCK)

    parts.append("<prompt>\n")

    if form.role:
        parts.append(f"  <role>{form.role}</role>\n")
    if form.task:
        parts.append(_xml_block("task", form.task))
    if form.context:
        parts.append(_xml_block("context", form.context))
    if form.requirements:
        parts.append(_xml_block("requirements", form.requirements))
    # Style is gated on the xml_tags feature; other formats do not gate it.
    if form.style and model.has_feature("xml_tags"):
        parts.append(_xml_block("style", form.style))
    if form.output:
        parts.append(_xml_block("output", form.output))

    parts.append("</prompt>")

    return _result(
        "".join(parts),
        PromptFormat.XML,
        supportsThinking=guidelines.supports_thinking,
    )


# =========================================================
# JSON
# =========================================================

def render_json(form, guidelines, model) -> RenderResult:
    """Render a JSON object with 2-space indentation."""
    prompt_object = {
        "role": form.role or None,
        "task": form.task or None,
        "context": form.context or None,
        "requirements": form.requirements or None,
    }
    if form.style:
        prompt_object["style"] = form.style
    if form.output:
        prompt_object["output_format"] = form.output
    prompt_object["instructions"] = list(guidelines.best_practices)
    prompt_object["model_info"] = {
        "name": model.name,
        "capabilities": model.excellent_capabilities(),
    }

    prompt_object = {key: value for key, value in prompt_object.items() if value is not None}

    prompt = json.dumps(prompt_object, indent=2, ensure_ascii=False)

    return _result(prompt, PromptFormat.JSON, structured=True)


# =========================================================
# MARKDOWN
# =========================================================

_MARKDOWN_SECTIONS = (
    ("role", "Role"),
    ("task", "Task"),
    ("context", "Context"),
    ("requirements", "Requirements"),
    ("style", "Style Guidelines"),
    ("output", "Output Format"),
)


def render_markdown(form, guidelines, model) -> RenderResult:
    """Render `##` sections followed by a numbered best-practice list."""
    prompt = f"# {model.name} Prompt\n\n"

    for attribute, heading in _MARKDOWN_SECTIONS:
        value = getattr(form, attribute)
        if value:
            prompt += f"## {heading}\n{value}\n\n"

    prompt += f"## Best Practices for {model.name}\n"
    for index, practice in enumerate(guidelines.best_practices, start=1):
        prompt += f"{index}. {practice}\n"

    return _result(prompt, PromptFormat.MARKDOWN, readable=True)


# =========================================================
# STRUCTURED
# =========================================================

def render_structured(form, guidelines, model) -> RenderResult:
    """Render uppercase-headed sections; the only format with a role default."""
    prompt = f"ROLE:\n{form.role or 'Assistant'}\n\n"

    if form.task:
        prompt += f"TASK:\n{form.task}\n\n"
    if form.context:
        prompt += f"CONTEXT:\n{form.context}\n\n"
    if form.requirements:
        prompt += f"REQUIREMENTS:\n{format_as_bullet_points(form.requirements)}\n\n"
    if form.style:
        prompt += f"STYLE:\n{form.style}\n\n"
    if form.output:
        prompt += f"OUTPUT FORMAT:\n{form.output}\n\n"

    prompt += f"OPTIMIZATION FOR {model.name.upper()}:\n"
    for practice in guidelines.best_practices:
        prompt += f"• {practice}\n"

    return _result(prompt, PromptFormat.STRUCTURED, clear=True)


# =========================================================
# YAML
# =========================================================

def render_yaml(form, guidelines, model) -> RenderResult:
    """Render a YAML document with quoted scalars and `|` block scalars."""
    prompt = f"# {model.name} Prompt Configuration\n\n"
    prompt += f"model: {model.id}\n"
    prompt += f"provider: {model.provider}\n\n"

    prompt += "prompt:\n"
    if form.role:
        prompt += f'  role: "{escape_yaml(form.role)}"\n'
    if form.task:
        prompt += f"  task: |\n{BLOCK_INDENT}{format_multiline_content(form.task, BLOCK_INDENT)}\n"
    if form.context:
        prompt += f"  context: |\n{BLOCK_INDENT}{format_multiline_content(form.context, BLOCK_INDENT)}\n"
    if form.requirements:
        prompt += (
            f"  requirements: |\n{BLOCK_INDENT}"
            f"{format_multiline_content(form.requirements, BLOCK_INDENT)}\n"
        )
    if form.style:
        prompt += f'  style: "{escape_yaml(form.style)}"\n'
    if form.output:
        prompt += f'  output_format: "{escape_yaml(form.output)}"\n'

    prompt += "\noptimization:\n"
    prompt += "  best_practices:\n"
    for practice in guidelines.best_practices:
        prompt += f'    - "{escape_yaml(practice)}"\n'

    return _result(prompt, PromptFormat.YAML, configurable=True)


# =========================================================
# PLAIN
# =========================================================

def render_plain(form, guidelines, model) -> RenderResult:
    """Render natural-language paragraphs for models that dislike markup."""
    prompt = ""

    if form.role:
        prompt += f"You are a {form.role}. "
    if form.task:
        prompt += f"Your task is: {form.task}\n\n"
    if form.context:
        prompt += f"Context: {form.context}\n\n"
    if form.requirements:
        prompt += f"Please ensure you: {form.requirements}\n\n"
    if form.style:
        prompt += f"Style: {form.style}\n\n"
    if form.output:
        prompt += f"Output format: {form.output}\n\n"

    prompt += f"Please follow these guidelines: {', '.join(guidelines.best_practices)}."

    return _result(prompt, PromptFormat.PLAIN, natural=True)


RENDERERS = {
    PromptFormat.XML: render_xml,
    PromptFormat.JSON: render_json,
    PromptFormat.MARKDOWN: render_markdown,
    PromptFormat.STRUCTURED: render_structured,
    PromptFormat.YAML: render_yaml,
    PromptFormat.PLAIN: render_plain,
}
