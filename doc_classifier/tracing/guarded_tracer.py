"""Failure policy for observability sinks.

A sink must never interrupt document processing: every call into the wrapped
tracer is caught here, logged as a warning, and dropped.
"""

from collections.abc import Mapping

from doc_classifier.logging.logger import Log
from doc_classifier.tracing.base import BaseTracer


class GuardedTracer(BaseTracer):
    """Wraps a tracer so that its failures are logged instead of raised."""

    def __init__(self, inner: BaseTracer) -> None:
        self._inner = inner

    def begin(self, context: Mapping[str, object]) -> str:
        try:
            return self._inner.begin(context)
        except Exception as exc:
            Log.warning(f"Tracer begin failed: {exc}")
            return ""

    def record(
        self,
        token: str,
        step: str,
        input: Mapping[str, object],
        output: Mapping[str, object] | None = None,
        error: str | None = None,
    ) -> None:
        try:
            self._inner.record(token, step, input, output=output, error=error)
        except Exception as exc:
            Log.warning(f"Tracer record failed for step '{step}': {exc}")

    def end(self, token: str) -> None:
        try:
            self._inner.end(token)
        except Exception as exc:
            Log.warning(f"Tracer end failed: {exc}")
