"""Token estimation heuristics.

Two estimators live here:
    - `estimate_tokens`: the character-based figure reported in render
      metadata (`ceil(len / 4)`).
    - `count_approx_tokens` / `count_chat_payload_tokens`: a word and
      punctuation based estimate used to budget `max_tokens` for enrichment
      requests.

Neither is a real tokenizer. Both are deterministic and side-effect free.
"""

import math
import re

CHARS_PER_TOKEN_ESTIMATE = 4

_PUNCTUATION = re.compile(r"[.,!?;:()\[\]{}<>\"'`~@#$%^&*_+=\\/|-]")


def estimate_tokens(text: str) -> int:
    """Return the rough token count used in render metadata."""
    return math.ceil(len(text) / CHARS_PER_TOKEN_ESTIMATE)


def count_approx_tokens(text) -> int:
    """Approximate tokens as words plus a fraction of punctuation marks.

    Non-string and empty values count as zero.
    """
    if not text or not isinstance(text, str):
        return 0
    words = len(text.split())
    punctuation = len(_PUNCTUATION.findall(text))
    return max(0, math.floor(words + punctuation * 0.2))


def count_chat_payload_tokens(messages) -> int:
    """Approximate tokens for a chat `messages` list.

    Adds a fixed overhead of 3 per message and 3 for the payload itself.
    """
    if not isinstance(messages, (list, tuple)):
        return 0

    total = 0
    for message in messages:
        content = ""
        if isinstance(message, dict) and message.get("content") is not None:
            content = str(message["content"])
        total += count_approx_tokens(content) + 3

    return total + 3
