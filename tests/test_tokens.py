from xmlprompter.prompting.tokens import count_approx_tokens, count_chat_payload_tokens, estimate_tokens


def test_estimate_tokens_rounds_up():
    assert estimate_tokens("") == 0
    assert estimate_tokens("abcd") == 1
    assert estimate_tokens("abcde") == 2


def test_count_approx_tokens():
    assert count_approx_tokens("Hello, world!") == 2
    assert count_approx_tokens("a, b, c, d, e.") == 6
    assert count_approx_tokens(None) == 0
    assert count_approx_tokens(12) == 0


def test_count_chat_payload_tokens():
    messages = [
        {"role": "system", "content": "one two"},
        {"role": "user", "content": None},
    ]

    assert count_chat_payload_tokens(messages) == (2 + 3) + (0 + 3) + 3
    assert count_chat_payload_tokens("not a list") == 0
