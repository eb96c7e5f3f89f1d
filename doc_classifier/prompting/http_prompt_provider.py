import httpx

from doc_classifier.logging.logger import Log
from doc_classifier.prompting.base import BasePromptProvider


class HttpPromptProvider(BasePromptProvider):
    """Fetches prompt overrides with ``GET {base_url}/prompts/{key}``.

    A 2xx JSON body with a non-empty ``prompt`` string is an override; any
    other outcome is logged and treated as absent.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str = "",
        timeout_seconds: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    def fetch_optimized(self, key: str) -> str | None:
        try:
            response = self._client.get(f"/prompts/{key}")
            if response.status_code == 404:
                return None
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            Log.warning(f"Prompt service unavailable for '{key}': {exc}")
            return None

        prompt = body.get("prompt") if isinstance(body, dict) else None
        if not isinstance(prompt, str) or not prompt.strip():
            return None
        return prompt

    def close(self) -> None:
        self._client.close()
