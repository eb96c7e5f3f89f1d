from abc import ABC, abstractmethod
from collections.abc import Mapping


class BaseTracer(ABC):
    """Contract for observability sinks recording per-step inputs and outputs."""

    @abstractmethod
    def begin(self, context: Mapping[str, object]) -> str:
        """Open a trace session and return its token."""

    @abstractmethod
    def record(
        self,
        token: str,
        step: str,
        input: Mapping[str, object],
        output: Mapping[str, object] | None = None,
        error: str | None = None,
    ) -> None:
        """Record one pipeline step; exactly one of output/error is expected."""

    @abstractmethod
    def end(self, token: str) -> None:
        """Close a trace session."""
