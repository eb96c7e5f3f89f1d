"""AI classification and summarization of extracted document text."""

import json
from concurrent.futures import ThreadPoolExecutor

from doc_classifier.analysis.exceptions import (
    AgentAuthenticationError,
    AgentError,
    AgentQuotaError,
    AgentRateLimitError,
    AgentResponseError,
)
from doc_classifier.analysis.models import ClassificationResult, DocumentAnalysis, SummaryResult
from doc_classifier.analysis.prompt_loader import CLASSIFY_PROMPT_KEY, SUMMARIZE_PROMPT_KEY
from doc_classifier.completion.client_base import BaseCompletionClient
from doc_classifier.completion.exceptions import (
    CompletionAuthenticationError,
    CompletionError,
    CompletionQuotaError,
    CompletionRateLimitError,
)
from doc_classifier.logging.logger import Log
from doc_classifier.prompting.resolver import PromptResolver
from doc_classifier.tracing.session import TraceSession, preview

_ERROR_TYPES: tuple[tuple[type[CompletionError], type[AgentError]], ...] = (
    (CompletionAuthenticationError, AgentAuthenticationError),
    (CompletionQuotaError, AgentQuotaError),
    (CompletionRateLimitError, AgentRateLimitError),
)


def truncate(text: str, max_chars: int) -> str:
    """Cut text to ``max_chars`` characters, marking the cut with an ellipsis."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


class DocumentAgent:
    """Classifies and summarizes document text with a chat completion model."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        prompts: PromptResolver,
        temperature: float = 0.0,
        classification_max_chars: int = 3000,
        summary_max_chars: int = 4000,
    ) -> None:
        self._client = client
        self._model = model
        self._prompts = prompts
        self._temperature = temperature
        self._classification_max_chars = classification_max_chars
        self._summary_max_chars = summary_max_chars

    def analyze(self, text: str, trace: TraceSession | None = None) -> DocumentAnalysis:
        """Run classification and summarization concurrently and join the results."""
        if not text.strip():
            raise AgentError("The document is empty or does not contain valid text")
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="analysis") as pool:
            classification = pool.submit(self.classify, text, trace)
            summary = pool.submit(self.summarize, text, trace)
            return DocumentAnalysis(
                classification=classification.result(),
                summary=summary.result(),
            )

    def classify(self, text: str, trace: TraceSession | None = None) -> ClassificationResult:
        payload = self._complete(
            prompt_key=CLASSIFY_PROMPT_KEY,
            user_prompt=truncate(text, self._classification_max_chars),
            action="classifying",
            document_length=len(text),
            trace=trace or TraceSession.disabled(),
        )
        result = ClassificationResult.from_payload(payload)
        Log.info(f"Classified document as '{result.category}' ({result.confidence})")
        return result

    def summarize(self, text: str, trace: TraceSession | None = None) -> SummaryResult:
        payload = self._complete(
            prompt_key=SUMMARIZE_PROMPT_KEY,
            user_prompt=truncate(text, self._summary_max_chars),
            action="summarizing",
            document_length=len(text),
            trace=trace or TraceSession.disabled(),
        )
        result = SummaryResult.from_payload(payload)
        Log.info(f"Summarized document: {len(result.key_points)} key points")
        return result

    def build_messages(self, prompt_key: str, user_prompt: str) -> list[dict[str, object]]:
        return [
            {"role": "system", "content": self._prompts.resolve(prompt_key)},
            {"role": "user", "content": user_prompt},
        ]

    def _complete(
        self,
        *,
        prompt_key: str,
        user_prompt: str,
        action: str,
        document_length: int,
        trace: TraceSession,
    ) -> dict[str, object]:
        messages = self.build_messages(prompt_key, user_prompt)
        trace_input = {"prompt_key": prompt_key, "document_length": document_length}
        try:
            raw = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                messages=messages,
                json_response=True,
            )
            Log.debug(f"AI raw response for {prompt_key}:\n{raw}")
            payload = self._parse_json(raw)
        except CompletionError as exc:
            trace.record(prompt_key, trace_input, error=str(exc))
            raise self._agent_error(exc, action) from exc
        except AgentError as exc:
            trace.record(prompt_key, {**trace_input, "response": preview(raw)}, error=str(exc))
            raise

        trace.record(prompt_key, trace_input, output=payload)
        return payload

    @staticmethod
    def _agent_error(exc: CompletionError, action: str) -> AgentError:
        for completion_type, agent_type in _ERROR_TYPES:
            if isinstance(exc, completion_type):
                return agent_type(agent_type.hint)
        return AgentError(f"Error {action} document: {exc}")

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AgentResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AgentResponseError("JSON response must be an object")
        return parsed
