from doc_classifier.extraction.base import BaseExtractor
from doc_classifier.extraction.models import ExtractedContent
from doc_classifier.tracing.session import TraceSession


class TextExtractor(BaseExtractor):
    method = "Text Parser"
    trace_step = "extract_text_plain"

    def extract(
        self,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        return ExtractedContent(text=content.decode("utf-8", errors="replace"))
