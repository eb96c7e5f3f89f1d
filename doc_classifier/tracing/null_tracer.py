from collections.abc import Mapping

from doc_classifier.tracing.base import BaseTracer


class NullTracer(BaseTracer):
    """Tracer that discards everything. Used when tracing is disabled."""

    def begin(self, context: Mapping[str, object]) -> str:
        _ = context
        return ""

    def record(
        self,
        token: str,
        step: str,
        input: Mapping[str, object],
        output: Mapping[str, object] | None = None,
        error: str | None = None,
    ) -> None:
        _ = token, step, input, output, error

    def end(self, token: str) -> None:
        _ = token
