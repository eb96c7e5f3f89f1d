"""Two-tier system prompt resolution: external override first, bundled file second."""

import threading

from doc_classifier.logging.logger import Log
from doc_classifier.prompting.base import BasePromptProvider


class PromptResolver:
    """Resolves the system prompt for a prompt key.

    Overrides are fetched on every call unless ``cache_overrides`` is set, in
    which case the first answer (override or default) is kept for the process
    lifetime.
    """

    def __init__(
        self,
        provider: BasePromptProvider,
        defaults: dict[str, str],
        *,
        cache_overrides: bool = False,
    ) -> None:
        self._provider = provider
        self._defaults = dict(defaults)
        self._cache_overrides = cache_overrides
        self._cache: dict[str, str] = {}
        self._lock = threading.Lock()

    def resolve(self, key: str) -> str:
        if key not in self._defaults:
            raise KeyError(f"No default prompt registered for '{key}'")

        if self._cache_overrides:
            with self._lock:
                cached = self._cache.get(key)
            if cached is not None:
                return cached

        override = self._provider.fetch_optimized(key)
        if override is not None:
            Log.info(f"Using optimized prompt for '{key}'")
            prompt = override
        else:
            Log.debug(f"Using bundled prompt for '{key}'")
            prompt = self._defaults[key]

        if self._cache_overrides:
            with self._lock:
                self._cache[key] = prompt
        return prompt
