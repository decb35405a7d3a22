"""LLM access package.

Architectural role:
    Provides provider configuration, request-payload construction, and the
    transport adapter used by the enrichment pipeline to call an
    OpenAI-compatible chat completion endpoint.

Module split:
    - `provider_config`: environment-driven provider and model configuration.
    - `service`: canonical messages-to-payload adapter.
    - `client`: HTTP transport and response parsing.
"""
