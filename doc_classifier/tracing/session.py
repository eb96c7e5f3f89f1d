from collections.abc import Mapping
from dataclasses import dataclass

from doc_classifier.tracing.base import BaseTracer
from doc_classifier.tracing.guarded_tracer import GuardedTracer
from doc_classifier.tracing.null_tracer import NullTracer

PREVIEW_CHARS = 500


def preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    """Truncate text for a trace record."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


@dataclass
class TraceSession:
    """A tracer bound to the token of one request."""

    tracer: BaseTracer
    token: str = ""

    @classmethod
    def start(cls, tracer: BaseTracer, context: Mapping[str, object]) -> "TraceSession":
        guarded = tracer if isinstance(tracer, GuardedTracer) else GuardedTracer(tracer)
        return cls(tracer=guarded, token=guarded.begin(context))

    @classmethod
    def disabled(cls) -> "TraceSession":
        return cls(tracer=NullTracer())

    def record(
        self,
        step: str,
        input: Mapping[str, object],
        output: Mapping[str, object] | None = None,
        error: str | None = None,
    ) -> None:
        self.tracer.record(self.token, step, input, output=output, error=error)

    def end(self) -> None:
        self.tracer.end(self.token)
