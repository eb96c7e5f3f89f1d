from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from doc_classifier.completion.exceptions import (
    CompletionAuthenticationError,
    CompletionError,
    CompletionNetworkError,
    CompletionQuotaError,
    CompletionRateLimitError,
)
from doc_classifier.completion.openai_client_adapter import OpenAIClientAdapter

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _status_error(cls: type[openai.APIStatusError], status: int, code: str | None) -> Exception:
    body = {"code": code} if code is not None else None
    return cls(
        "provider error",
        response=httpx.Response(status, request=_REQUEST),
        body=body,
    )


def _call(mock_client: MagicMock, **overrides: object) -> str:
    with patch(
        "doc_classifier.completion.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)
        kwargs: dict[str, object] = {
            "model": "m",
            "temperature": 0.0,
            "messages": [{"role": "user", "content": "hi"}],
        }
        kwargs.update(overrides)
        return adapter.create_chat_completion(**kwargs)  # type: ignore[arg-type]


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        assert _call(mock_client) == '{"ok": true}'

    def test_json_mode_and_max_tokens_are_forwarded(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")

        _call(mock_client, json_response=True, max_tokens=2000)

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["max_tokens"] == 2000
        assert kwargs["temperature"] == 0.0

    def test_plain_mode_sends_no_response_format(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("text")

        _call(mock_client)

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert "response_format" not in kwargs
        assert "max_tokens" not in kwargs

    def test_client_is_built_without_retries(self) -> None:
        with patch("doc_classifier.completion.openai_client_adapter.openai.OpenAI") as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=60, base_url="http://local/v1")
        mock_cls.assert_called_once_with(
            api_key="k", timeout=60, base_url="http://local/v1", max_retries=0
        )

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(CompletionError, match="empty response"):
            _call(mock_client)

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        with pytest.raises(CompletionError, match="no choices"):
            _call(mock_client)


class TestOpenAIClientAdapterErrorMapping:
    def test_connection_failure_is_network_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=_REQUEST
        )
        with pytest.raises(CompletionNetworkError, match="network error"):
            _call(mock_client)

    def test_httpx_timeout_is_network_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.ReadTimeout("slow")
        with pytest.raises(CompletionNetworkError):
            _call(mock_client)

    def test_authentication_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.AuthenticationError, 401, "invalid_api_key"
        )
        with pytest.raises(CompletionAuthenticationError):
            _call(mock_client)

    def test_insufficient_quota_is_quota_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.RateLimitError, 429, "insufficient_quota"
        )
        with pytest.raises(CompletionQuotaError):
            _call(mock_client)

    def test_plain_429_is_rate_limit_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.RateLimitError, 429, "rate_limit_exceeded"
        )
        with pytest.raises(CompletionRateLimitError):
            _call(mock_client)

    def test_other_api_error_is_generic(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.InternalServerError, 500, None
        )
        with pytest.raises(CompletionError, match="API error") as exc_info:
            _call(mock_client)
        assert type(exc_info.value) is CompletionError
