"""XMLPrompter API adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level validation, caller identification and response
  shaping.
- Delegates rendering, validation and enrichment to `prompting` and `core`.

Scope:
- Request lifecycle control for adapter concerns only.
- No direct model invocation logic is implemented in this package root.
"""
