"""Provider/runtime configuration for the LLM layer.

Architectural role:
    Centralizes model/provider selection and credential lookup for
    `xmlprompter.llm.service` and `xmlprompter.llm.client`.

Model call flow integration:
    - `service.generate_answer` consumes `MODEL_NAME`.
    - `client.send_request` consumes the provider endpoint map, key
      resolution and `REQUEST_TIMEOUT`.

Determinism:
    Deterministic for a fixed process environment and key files. Values are
    resolved at import time (plus runtime key-file reads in `load_key`).

Failure behavior:
    Missing key material is represented as `None` and turned into an
    `LLMRequestError` by `client`.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Primary model routing controls.
PROVIDER = os.getenv("PROVIDER", "openai")
MODEL_NAME = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# Single attempt per request; no retry loop.
REQUEST_TIMEOUT = float(os.getenv("LLM_TIMEOUT_SECONDS", "120"))

# OpenAI chat completions, plus a keyless local OpenAI-compatible server.
PROVIDERS = {

    "openai": {
        "url": "https://api.openai.com/v1/chat/completions",
        "key_file": "config/openai.key"
    },

    "local": {
        "url": os.getenv("LOCAL_LLM_URL", "http://127.0.0.1:8080/v1/chat/completions"),
        "key_file": None
    }

}


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/openai.key` -> `OPENAI_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip()
