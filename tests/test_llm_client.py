from unittest.mock import MagicMock, patch

import pytest
import requests

from xmlprompter.llm import provider_config
from xmlprompter.llm.client import LLMRequestError, send_request
from xmlprompter.llm.service import build_payload, generate_answer


def _response(data):
    response = MagicMock()
    response.json.return_value = data
    response.raise_for_status.return_value = None
    return response


COMPLETION = {
    "model": "gpt-4o-mini",
    "choices": [{"message": {"role": "assistant", "content": "  enhanced  "}}],
    "usage": {"total_tokens": 42},
}


@pytest.fixture
def openai_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    return "sk-test"


@patch("xmlprompter.llm.client.requests.post")
def test_send_request_parses_completion(mock_post, openai_key):
    mock_post.return_value = _response(COMPLETION)

    result = send_request({"model": "gpt-4o-mini", "messages": []}, provider="openai")

    assert result.text == "enhanced"
    assert result.total_tokens == 42
    assert result.model == "gpt-4o-mini"

    kwargs = mock_post.call_args.kwargs
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["timeout"] == provider_config.REQUEST_TIMEOUT
    assert mock_post.call_args.args[0] == provider_config.PROVIDERS["openai"]["url"]


@patch("xmlprompter.llm.client.requests.post")
def test_http_error_is_sanitized(mock_post, openai_key):
    response = _response({})
    response.raise_for_status.side_effect = requests.exceptions.HTTPError(
        "429 Too Many Requests: secret body", response=MagicMock(status_code=429)
    )
    mock_post.return_value = response

    with pytest.raises(LLMRequestError) as exc:
        send_request({"messages": []}, provider="openai")

    assert str(exc.value) == "OPENAI HTTP ERROR (429)"


@patch("xmlprompter.llm.client.requests.post")
def test_network_error_without_status(mock_post, openai_key):
    mock_post.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(LLMRequestError) as exc:
        send_request({"messages": []}, provider="openai")

    assert str(exc.value) == "OPENAI HTTP ERROR"


@patch("xmlprompter.llm.client.requests.post")
def test_empty_completion_is_an_error(mock_post, openai_key):
    mock_post.return_value = _response({"choices": [{"message": {"content": ""}}]})

    with pytest.raises(LLMRequestError) as exc:
        send_request({"messages": []}, provider="openai")

    assert str(exc.value) == "OPENAI REQUEST FAILED"


def test_missing_key(monkeypatch, tmp_path):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(LLMRequestError) as exc:
        send_request({"messages": []}, provider="openai")

    assert str(exc.value) == "OPENAI KEY FILE NOT FOUND"


def test_key_file_is_read(monkeypatch, tmp_path):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "openai.key").write_text("sk-file\n")
    monkeypatch.chdir(tmp_path)

    assert provider_config.load_key("config/openai.key") == "sk-file"


def test_invalid_provider():
    with pytest.raises(LLMRequestError) as exc:
        send_request({"messages": []}, provider="nowhere")

    assert str(exc.value) == "INVALID PROVIDER"


def test_only_openai_and_local_providers_are_routable():
    assert set(provider_config.PROVIDERS) == {"openai", "local"}

    with pytest.raises(LLMRequestError) as exc:
        send_request({"messages": []}, provider="groq")

    assert str(exc.value) == "INVALID PROVIDER"


@patch("xmlprompter.llm.client.requests.post")
def test_local_provider_sends_no_authorization(mock_post):
    mock_post.return_value = _response(COMPLETION)

    send_request({"messages": []}, provider="local")

    assert "Authorization" not in mock_post.call_args.kwargs["headers"]


def test_build_payload_forwards_known_sampling_keys(monkeypatch):
    monkeypatch.setattr(provider_config, "MODEL_NAME", "gpt-test")

    payload = build_payload(
        [{"role": "user", "content": "hi"}],
        {"temperature": 0.5, "top_p": None, "seed": 7, "max_tokens": 300},
    )

    assert payload == {
        "model": "gpt-test",
        "messages": [{"role": "user", "content": "hi"}],
        "temperature": 0.5,
        "max_tokens": 300,
    }


@patch("xmlprompter.llm.service.send_request")
def test_generate_answer_uses_model_override(mock_send):
    generate_answer([{"role": "user", "content": "hi"}], model="gpt-4o")

    assert mock_send.call_args.args[0]["model"] == "gpt-4o"
