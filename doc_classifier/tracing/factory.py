from doc_classifier.config.settings import Settings
from doc_classifier.tracing.base import BaseTracer
from doc_classifier.tracing.guarded_tracer import GuardedTracer
from doc_classifier.tracing.log_tracer import LogTracer
from doc_classifier.tracing.null_tracer import NullTracer


def build_tracer(settings: Settings) -> BaseTracer:
    """Create the observability sink, always wrapped in the failure guard."""
    if not settings.tracing_enabled:
        return NullTracer()
    return GuardedTracer(LogTracer())
