import httpx
import openai

from doc_classifier.completion.client_base import BaseCompletionClient
from doc_classifier.completion.exceptions import (
    CompletionAuthenticationError,
    CompletionError,
    CompletionNetworkError,
    CompletionQuotaError,
    CompletionRateLimitError,
)

_QUOTA_CODES = frozenset({"insufficient_quota", "billing_hard_limit_reached"})


class OpenAIClientAdapter(BaseCompletionClient):
    """Chat completion client built on the OpenAI-compatible API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, object]],
        json_response: bool = False,
        max_tokens: int | None = None,
    ) -> str:
        kwargs: dict[str, object] = {
            "model": model,
            "temperature": temperature,
            "messages": messages,
        }
        if json_response:
            kwargs["response_format"] = {"type": "json_object"}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            response = self._client.chat.completions.create(**kwargs)  # type: ignore[call-overload]
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise CompletionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.AuthenticationError as exc:
            raise CompletionAuthenticationError(
                f"AI provider rejected the API key: {exc}"
            ) from exc
        except openai.RateLimitError as exc:
            if exc.code in _QUOTA_CODES:
                raise CompletionQuotaError(f"AI provider quota exhausted: {exc}") from exc
            raise CompletionRateLimitError(f"AI provider rate limit hit: {exc}") from exc
        except openai.APIError as exc:
            raise CompletionError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise CompletionError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise CompletionError("AI returned empty response")
        return content
