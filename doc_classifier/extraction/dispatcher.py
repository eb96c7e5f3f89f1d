"""Extraction dispatcher.

Resolves a document to bytes and a ContentType, runs the one extractor
registered for that type, and normalizes the result. Every outcome is
recorded on the request's trace session.
"""

import time
from collections.abc import Mapping

from doc_classifier.extraction.base import BaseExtractor
from doc_classifier.extraction.content_types import (
    ContentType,
    classify_mime,
    is_declared,
    processing_method,
)
from doc_classifier.extraction.exceptions import (
    DocumentExtractionError,
    EmptyExtractionError,
    ExtractionError,
    FetchError,
    UnsupportedFormatError,
)
from doc_classifier.extraction.fetcher import RemoteFetcher
from doc_classifier.extraction.models import ExtractedContent, ExtractionResult, RawDocument
from doc_classifier.logging.logger import Log
from doc_classifier.tracing.session import TraceSession, preview


class ExtractionDispatcher:
    """Turns a RawDocument into non-empty, trimmed text."""

    def __init__(
        self,
        extractors: Mapping[ContentType, BaseExtractor],
        fetcher: RemoteFetcher,
    ) -> None:
        missing = [
            t.value for t in ContentType if t is not ContentType.UNKNOWN and t not in extractors
        ]
        if missing:
            raise ValueError(f"No extractor registered for content types: {missing}")
        self._extractors = dict(extractors)
        self._fetcher = fetcher

    def extract(
        self,
        document: RawDocument,
        trace: TraceSession | None = None,
    ) -> ExtractionResult:
        """Extract text from an uploaded file or a URL.

        Raises:
            FetchError: the URL could not be downloaded.
            UnsupportedFormatError: the declared type has no extractor, or an
                undeclared payload is not valid UTF-8 text.
            ExtractionError: the selected extractor failed.
            EmptyExtractionError: nothing but whitespace was extracted.
        """
        trace = trace or TraceSession.disabled()
        try:
            return self._extract(document, trace)
        except DocumentExtractionError as exc:
            Log.error(f"Error in document processing: {exc}")
            trace.record(
                "document_processing_error",
                {
                    "input_type": "url" if document.is_remote else "file",
                    "mime_type": document.mime_type,
                    "input_size": len(document.url or "") if document.is_remote
                    else len(document.content or b""),
                },
                error=str(exc),
            )
            raise

    def _extract(self, document: RawDocument, trace: TraceSession) -> ExtractionResult:
        content, mime_type = self._load(document, trace)
        Log.info(f"Processing document: {len(content)} bytes, type={mime_type}")

        if not content.strip():
            self._record_empty(trace, mime_type, len(content))
            raise EmptyExtractionError()

        if not is_declared(mime_type):
            content_type = ContentType.UNKNOWN
            method = processing_method(content_type)
            extracted = ExtractedContent(text=self._decode_undeclared(content))
            trace.record(
                "extract_text_auto_detect",
                {"file_size": len(content), "detection_attempt": "text"},
                output={
                    "extracted_text": preview(extracted.text),
                    "characters_extracted": len(extracted.text),
                    "method": method,
                },
            )
        else:
            content_type = classify_mime(mime_type)
            if content_type is ContentType.UNKNOWN:
                raise UnsupportedFormatError(f"Unsupported file type: {mime_type}")
            extractor = self._extractors[content_type]
            method = extractor.method
            extracted = self._run(extractor, content, mime_type, trace)

        text = extracted.text.strip()
        if not text:
            self._record_empty(trace, mime_type, len(content))
            raise EmptyExtractionError()

        Log.info(f"Document processing completed using {method}: {len(text)} characters")
        return ExtractionResult(
            text=text,
            content_type=content_type,
            method=method,
            mime_type=mime_type,
            page_count=extracted.page_count,
        )

    def _load(self, document: RawDocument, trace: TraceSession) -> tuple[bytes, str | None]:
        if document.url is None:
            return document.content or b"", document.mime_type

        try:
            fetched = self._fetcher.fetch(document.url)
        except FetchError as exc:
            trace.record("download_from_url", {"url": document.url}, error=str(exc))
            raise
        mime_type = fetched.mime_type or document.mime_type
        trace.record(
            "download_from_url",
            {"url": document.url, "expected_type": document.mime_type},
            output={"downloaded_size": len(fetched.content), "detected_mime_type": mime_type},
        )
        return fetched.content, mime_type

    @staticmethod
    def _run(
        extractor: BaseExtractor,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        trace_input = {"mime_type": mime_type, "file_size": len(content)}
        started = time.monotonic()
        try:
            extracted = extractor.extract(content, mime_type, trace)
        except UnsupportedFormatError as exc:
            trace.record(extractor.trace_step, trace_input, error=str(exc))
            raise
        except Exception as exc:
            trace.record(extractor.trace_step, trace_input, error=str(exc))
            raise ExtractionError(extractor.method, str(exc)) from exc

        output: dict[str, object] = {
            "extracted_text": preview(extracted.text),
            "characters_extracted": len(extracted.text),
            "processing_time_ms": round((time.monotonic() - started) * 1000),
            "method": extractor.method,
        }
        if extracted.page_count is not None:
            output["pages"] = extracted.page_count
        trace.record(extractor.trace_step, trace_input, output=output)
        return extracted

    @staticmethod
    def _decode_undeclared(content: bytes) -> str:
        Log.info("No MIME type provided, attempting to read as text")
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UnsupportedFormatError(
                "Could not determine document format and failed to read as text"
            ) from exc

    @staticmethod
    def _record_empty(trace: TraceSession, mime_type: str | None, size: int) -> None:
        Log.warning("No text was extracted from the document")
        trace.record(
            "extract_text_empty",
            {"mime_type": mime_type, "file_size": size},
            output={"extracted_text": "", "characters_extracted": 0, "warning": "No text extracted"},
        )
