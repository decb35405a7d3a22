"""Transport client for OpenAI-compatible chat completion requests.

Architectural role:
    Executes one HTTP request against the configured provider and extracts the
    completion text and token usage.

Model invocation flow:
    `service.generate_answer` -> `send_request(payload)` -> provider endpoint
    -> `CompletionResult`.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once with the
    configured timeout.

Failure handling model:
    Every failure raises `LLMRequestError` with a sanitized, provider-labelled
    message. Raw exception text and response bodies are never exposed; the
    original exception is chained for logging.
"""

import logging
from dataclasses import dataclass

import requests

from xmlprompter.llm import provider_config
from xmlprompter.llm.provider_config import PROVIDERS, load_key


logger = logging.getLogger(__name__)


class LLMRequestError(RuntimeError):
    """Raised when the provider call cannot produce a completion."""


@dataclass
class CompletionResult:
    """Completion text plus usage reported by the provider."""

    text: str
    total_tokens: int = 0
    model: str | None = None


def _build_sanitized_http_error(provider_name: str, err: requests.exceptions.RequestException) -> str:
    """Build provider-labeled HTTP error text without exposing raw internals.

    Args:
        provider_name: Active provider label.
        err: Request exception instance.

    Returns:
        Sanitized error string with optional status code.
    """
    status_code = None
    if getattr(err, "response", None) is not None:
        status_code = getattr(err.response, "status_code", None)

    label = str(provider_name or "provider").upper()
    if status_code:
        return f"{label} HTTP ERROR ({status_code})"
    return f"{label} HTTP ERROR"


def _sanitize_runtime_error(provider_name: str) -> str:
    """Build generic provider-labeled runtime failure text."""
    label = str(provider_name or "provider").upper()
    return f"{label} REQUEST FAILED"


def _parse_completion(data) -> CompletionResult:
    content = data["choices"][0]["message"]["content"]
    if not content:
        raise ValueError("empty completion")

    usage = data.get("usage") or {}
    return CompletionResult(
        text=content.strip(),
        total_tokens=int(usage.get("total_tokens") or 0),
        model=data.get("model"),
    )


def send_request(payload: dict, provider: str | None = None) -> CompletionResult:
    """Send one request to the configured provider and parse the completion.

    Args:
        payload: OpenAI-compatible chat completion payload.
        provider: Provider key overriding `provider_config.PROVIDER`.

    Returns:
        `CompletionResult` with stripped text and `usage.total_tokens`
        (0 when the provider omits usage).

    Raises:
        LLMRequestError: Unknown provider, missing key, HTTP/network failure,
            or a response without completion content.
    """
    provider = provider or provider_config.PROVIDER

    config = PROVIDERS.get(provider)
    if config is None:
        raise LLMRequestError("INVALID PROVIDER")

    headers = {
        "Content-Type": "application/json"
    }

    key_file = config["key_file"]
    if key_file:
        api_key = load_key(key_file)
        if not api_key:
            raise LLMRequestError(f"{provider.upper()} KEY FILE NOT FOUND")
        headers["Authorization"] = f"Bearer {api_key}"

    try:
        response = requests.post(
            config["url"],
            headers=headers,
            json=payload,
            timeout=provider_config.REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return _parse_completion(response.json())

    except requests.exceptions.RequestException as err:
        logger.warning("LLM request to %s failed", provider, exc_info=True)
        raise LLMRequestError(_build_sanitized_http_error(provider, err)) from err

    except (KeyError, IndexError, TypeError, ValueError) as err:
        logger.warning("Malformed completion from %s", provider, exc_info=True)
        raise LLMRequestError(_sanitize_runtime_error(provider)) from err
