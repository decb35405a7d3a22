"""Prompt assembly for the LLM enrichment pass.

This module is intentionally narrow: it only builds strings from an already
validated enrichment request. Tier resolution, transport and response parsing
happen outside this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed ordering of prompt components.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - User fields are interpolated as raw strings.
    - Style and output fields are only forwarded for the `pro` tier.
"""

from xmlprompter.prompting.enrichment_levels import generate_enrichment_instruction


# =========================================================
# SYSTEM MESSAGE
# =========================================================

SYSTEM_MESSAGE = (
    "You are an expert prompt engineer specializing in creating optimized XML prompts "
    "for Claude AI. Your job is to enhance and refine prompts for maximum effectiveness."
)


# =========================================================
# TIER BLOCKS
# =========================================================

TIER_LABELS = {
    "pro": "PROFESSIONAL",
    "free": "STANDARD",
    "anonymous": "BASIC",
}

TIER_ENHANCEMENTS = {
    "pro": (
        "PROFESSIONAL ENHANCEMENTS:\n"
        "- Add comprehensive context and background\n"
        "- Include detailed requirements and constraints\n"
        "- Optimize for clarity and specificity\n"
        "- Add professional styling guidelines\n"
        "- Structure output format specifications\n"
        "- Include edge case considerations\n"
        "- Add success criteria and validation steps\n"
    ),
    "free": (
        "STANDARD ENHANCEMENTS:\n"
        "- Improve clarity and structure\n"
        "- Add relevant context\n"
        "- Optimize XML formatting\n"
        "- Include basic requirements\n"
    ),
    "anonymous": (
        "BASIC ENHANCEMENTS:\n"
        "- Create proper XML structure\n"
        "- Ensure essential elements are included\n"
    ),
}

RESPONSE_LAYOUT = (
    "Format your response as:\n"
    "ENHANCED_PROMPT:\n"
    "[Your enhanced XML prompt here]\n\n"
    "IMPROVEMENTS:\n"
    "- [List each improvement made]\n\n"
    "QUALITY_SCORE: [1-10]"
)


# =========================================================
# ENRICHMENT PROMPT
# =========================================================
# Prompt component order:
#   1) Request header
#   2) Original prompt data (style/output only for pro)
#   3) Deliverables list
#   4) Enhancement level + tier-specific enhancement list
#   5) Enrichment-level instruction
#   6) Response layout contract consumed by the response parser

def build_enrichment_prompt(request, tier: str) -> str:
    """Build the user message for the enrichment model.

    Args:
        request: `EnrichmentRequest` with the user's form fields and level.
        tier: Resolved caller tier (`pro`, `free` or `anonymous`).

    Returns:
        Fully assembled prompt string.

    Edge cases:
        - Unknown tiers are treated as `anonymous`.
        - Empty optional fields are omitted from the data list.
    """
    if tier not in TIER_LABELS:
        tier = "anonymous"
    is_pro = tier == "pro"

    data_lines = [
        f"- Role: {request.role}",
        f"- Task: {request.task}",
    ]
    if request.context:
        data_lines.append(f"- Context: {request.context}")
    if request.requirements:
        data_lines.append(f"- Requirements: {request.requirements}")
    if request.style and is_pro:
        data_lines.append(f"- Style: {request.style}")
    if request.output and is_pro:
        data_lines.append(f"- Output Format: {request.output}")

    return (
        "Please enhance this prompt for Claude AI by creating an optimized XML structure:\n\n"
        "ORIGINAL PROMPT DATA:\n"
        + "\n".join(data_lines) +
        "\n\nPLEASE PROVIDE:\n"
        "1. An enhanced XML prompt with proper structure and tags\n"
        "2. A list of specific improvements made\n"
        "3. A quality score from 1-10\n\n"
        f"ENHANCEMENT LEVEL: {TIER_LABELS[tier]}\n\n"
        + TIER_ENHANCEMENTS[tier] +
        "\nENRICHMENT INSTRUCTION:\n"
        + generate_enrichment_instruction(request.enrichment_level) +
        "\n\n"
        + RESPONSE_LAYOUT
    )


# =========================================================
# FALLBACK PROMPT
# =========================================================
# Used when the enrichment model is unavailable. Values are inserted as-is,
# without the multi-line re-indentation the XML renderer applies.

def generate_fallback_prompt(request) -> str:
    """Build a minimal XML prompt from role, task, context and requirements."""
    xml = "<prompt>\n"

    if request.role:
        xml += f"  <role>{request.role}</role>\n"
    if request.task:
        xml += f"  <task>\n    {request.task}\n  </task>\n"
    if request.context:
        xml += f"  <context>\n    {request.context}\n  </context>\n"
    if request.requirements:
        xml += f"  <requirements>\n    {request.requirements}\n  </requirements>\n"

    xml += "</prompt>"

    return xml
