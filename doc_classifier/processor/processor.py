import time

from doc_classifier.analysis.agent import DocumentAgent
from doc_classifier.analysis.factory import build_agent
from doc_classifier.completion.factory import CompletionClientFactory
from doc_classifier.config.settings import Settings
from doc_classifier.extraction.dispatcher import ExtractionDispatcher
from doc_classifier.extraction.factory import build_dispatcher
from doc_classifier.extraction.models import RawDocument
from doc_classifier.logging.logger import Log
from doc_classifier.processor.models import ProcessingMetadata, ProcessingResult, count_words
from doc_classifier.tracing.base import BaseTracer
from doc_classifier.tracing.factory import build_tracer
from doc_classifier.tracing.session import TraceSession, preview


class DocumentProcessor:
    """Orchestrates one request: extract -> classify + summarize -> metadata.

    Errors from any stage propagate unchanged after being recorded on the
    trace; nothing partial is returned.
    """

    def __init__(
        self,
        dispatcher: ExtractionDispatcher,
        agent: DocumentAgent,
        tracer: BaseTracer,
    ) -> None:
        self._dispatcher = dispatcher
        self._agent = agent
        self._tracer = tracer

    def process(self, document: RawDocument) -> ProcessingResult:
        started = time.monotonic()
        source = document.source_info()
        trace = TraceSession.start(self._tracer, {"source": source})
        try:
            trace.record("api_request_start", {"source": source})

            extraction = self._dispatcher.extract(document, trace)
            Log.info(f"Text extracted: {len(extraction.text)} characters")
            trace.record(
                "text_extraction_complete",
                {"source": source},
                output={
                    "extracted_length": len(extraction.text),
                    "word_count": count_words(extraction.text),
                },
            )

            analysis = self._agent.analyze(extraction.text, trace)

            elapsed_ms = round((time.monotonic() - started) * 1000)
            result = ProcessingResult(
                classification=analysis.classification,
                summary=analysis.summary,
                metadata=ProcessingMetadata.build(
                    extraction.text,
                    extraction_method=extraction.method,
                    source=source,
                    page_count=extraction.page_count,
                    processing_time_ms=elapsed_ms,
                ),
            )
            trace.record(
                "api_request_complete",
                {"document_length": len(extraction.text), "source": source},
                output={
                    "success": True,
                    "processing_time_ms": elapsed_ms,
                    "category": result.classification.category,
                },
            )
            Log.info(f"Document processed successfully in {elapsed_ms}ms")
            return result
        except Exception as exc:
            trace.record(
                "api_request_error",
                {"source": source, "preview": preview(str(exc), 200)},
                error=str(exc),
            )
            raise
        finally:
            trace.end()


def build_processor(settings: Settings) -> DocumentProcessor:
    """Build a DocumentProcessor with all required adapters."""
    completion_client = CompletionClientFactory.create(settings)
    return DocumentProcessor(
        dispatcher=build_dispatcher(settings, completion_client),
        agent=build_agent(settings, completion_client),
        tracer=build_tracer(settings),
    )
