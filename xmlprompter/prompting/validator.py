"""Prompt validation and complexity scoring.

Validation model:
    - Soft validation only: problems are reported in `errors`/`warnings`,
      nothing is raised.
    - `errors` decide `is_valid`; `warnings` never do.
    - An unknown model short-circuits before any field checks.

Complexity model:
    Five boolean predicates over field lengths and keywords are counted.
    Three or more is `high`, at least one is `medium`, otherwise `low`.
    The thresholds are fixed for compatibility with stored prompts.
"""

from xmlprompter.prompting.model_registry import get_model_by_id
from xmlprompter.prompting.prompt_types import FormData, ValidationResult

COMPLEXITY_LOW = "low"
COMPLEXITY_MEDIUM = "medium"
COMPLEXITY_HIGH = "high"

# Task longer than max_tokens * this many characters triggers a warning.
TASK_LENGTH_FACTOR = 3


def assess_complexity(form_data) -> str:
    """Classify a form as `low`, `medium` or `high` complexity.

    Missing fields are measured as empty strings.
    """
    form = FormData.coerce(form_data)
    requirements = form.requirements or ""
    context = form.context or ""
    style = form.style or ""
    output = form.output or ""

    factors = [
        len(requirements) > 200,
        len(context) > 300,
        len(style) > 100,
        len(output) > 100,
        "multiple" in requirements or "complex" in requirements,
    ]
    score = sum(1 for factor in factors if factor)

    if score >= 3:
        return COMPLEXITY_HIGH
    if score >= 1:
        return COMPLEXITY_MEDIUM
    return COMPLEXITY_LOW


def validate_prompt(form_data, model_id) -> ValidationResult:
    """Check required fields and model fit for a form.

    Args:
        form_data: `FormData` or mapping with form fields.
        model_id: Registry id of the target model.

    Returns:
        `ValidationResult`. For an unknown model only `is_valid=False` and
        `errors=["Invalid model selected"]` are set.
    """
    model = get_model_by_id(model_id)
    if model is None:
        return ValidationResult(is_valid=False, errors=["Invalid model selected"])

    form = FormData.coerce(form_data)
    errors: list[str] = []
    warnings: list[str] = []

    if not form.role:
        errors.append("Role is required")
    if not form.task:
        errors.append("Task description is required")

    if model.max_tokens and form.task and len(form.task) > model.max_tokens * TASK_LENGTH_FACTOR:
        warnings.append(f"Task description might be too long for {model.name}")

    complexity = assess_complexity(form)
    if complexity == COMPLEXITY_HIGH and model.prompt_guidelines.max_complexity == COMPLEXITY_MEDIUM:
        warnings.append(f"This prompt might be too complex for {model.name}")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        complexity=complexity,
        recommended_format=model.preferred_format,
    )
