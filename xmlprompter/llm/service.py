"""Prompt-to-payload adapter for LLM invocation.

Architectural role:
    Provides the canonical completion entrypoint used by the enrichment
    pipeline. This module bridges message construction (`core`) to transport
    (`xmlprompter.llm.client`).

Model call flow:
    messages + sampling -> payload construction -> `client.send_request(...)`.

Token behavior:
    `max_tokens` is budgeted upstream and forwarded unchanged.

Determinism:
    Payload construction is deterministic for fixed inputs and configuration.
    Generated output remains non-deterministic because inference runs remotely.
"""

from xmlprompter.llm import provider_config
from xmlprompter.llm.client import send_request

SAMPLING_KEYS = ("temperature", "top_p", "presence_penalty", "frequency_penalty", "max_tokens")


def build_payload(messages, sampling=None, model=None) -> dict:
    """Assemble an OpenAI-compatible chat payload.

    Only known sampling keys with non-`None` values are forwarded.
    """
    payload = {
        "model": model or provider_config.MODEL_NAME,
        "messages": list(messages),
    }
    for key in SAMPLING_KEYS:
        value = (sampling or {}).get(key)
        if value is not None:
            payload[key] = value
    return payload


def generate_answer(messages, sampling=None, model=None):
    """Invoke the configured model.

    Args:
        messages: Chat messages (`role`/`content` dicts), system first.
        sampling: Optional sampling parameters (see `SAMPLING_KEYS`).
        model: Model name overriding `OPENAI_MODEL`.

    Returns:
        `CompletionResult` from the transport client.

    Failure scenarios:
        Transport/provider failures raise `LLMRequestError` from `client`.
    """
    return send_request(build_payload(messages, sampling, model))
