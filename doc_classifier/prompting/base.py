from abc import ABC, abstractmethod


class BasePromptProvider(ABC):
    """Contract for external prompt-optimization services."""

    @abstractmethod
    def fetch_optimized(self, key: str) -> str | None:
        """Return an optimized system prompt for ``key``, or None to use the default.

        Implementations must not raise: an unreachable service means "no override".
        """


class NullPromptProvider(BasePromptProvider):
    """Never overrides anything. Used when no prompt service is configured."""

    def fetch_optimized(self, key: str) -> str | None:
        _ = key
        return None
