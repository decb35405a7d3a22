"""Core enrichment package.

Architectural role:
    Sits between the HTTP/CLI adapters and the LLM layer. Turns a validated
    enrichment request into model messages, invokes the model once, and shapes
    the response or the fallback.

Composition:
    - `enrichment_types`: request/result records and payload coercion.
    - `enrichment`: control flow, response parsing and fallback handling.

Determinism and side effects:
    Package import is side-effect free. Network I/O happens only inside
    `enrichment.enrich_prompt` through `xmlprompter.llm`.
"""
