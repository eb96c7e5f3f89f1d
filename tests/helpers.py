from collections.abc import Mapping

from doc_classifier.tracing.base import BaseTracer


class RecordingTracer(BaseTracer):
    """In-memory tracer that keeps every record for assertions."""

    def __init__(self) -> None:
        self.begun: list[Mapping[str, object]] = []
        self.records: list[dict[str, object]] = []
        self.ended: list[str] = []

    def begin(self, context: Mapping[str, object]) -> str:
        self.begun.append(context)
        return "token-1"

    def record(
        self,
        token: str,
        step: str,
        input: Mapping[str, object],
        output: Mapping[str, object] | None = None,
        error: str | None = None,
    ) -> None:
        self.records.append(
            {"token": token, "step": step, "input": input, "output": output, "error": error}
        )

    def end(self, token: str) -> None:
        self.ended.append(token)

    def steps(self) -> list[str]:
        return [str(r["step"]) for r in self.records]

    def record_for(self, step: str) -> dict[str, object]:
        return next(r for r in self.records if r["step"] == step)
