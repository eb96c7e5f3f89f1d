import json
import uuid
from collections.abc import Mapping

from doc_classifier.logging.logger import Log
from doc_classifier.tracing.base import BaseTracer


class LogTracer(BaseTracer):
    """Writes trace records as JSON lines through the application logger."""

    def __init__(self, agent_name: str = "document_classification") -> None:
        self._agent_name = agent_name

    def begin(self, context: Mapping[str, object]) -> str:
        token = uuid.uuid4().hex
        Log.info(f"trace {token} begin agent={self._agent_name} {self._dump(context)}")
        return token

    def record(
        self,
        token: str,
        step: str,
        input: Mapping[str, object],
        output: Mapping[str, object] | None = None,
        error: str | None = None,
    ) -> None:
        payload: dict[str, object] = {"input": dict(input)}
        if error is not None:
            payload["error"] = error
            Log.warning(f"trace {token} step={step} {self._dump(payload)}")
            return
        payload["output"] = dict(output or {})
        Log.info(f"trace {token} step={step} {self._dump(payload)}")

    def end(self, token: str) -> None:
        Log.info(f"trace {token} end agent={self._agent_name}")

    @staticmethod
    def _dump(payload: Mapping[str, object]) -> str:
        return json.dumps(payload, default=str, ensure_ascii=False)
