from doc_classifier.extraction.base import BaseExtractor
from doc_classifier.extraction.models import ExtractedContent
from doc_classifier.pdf.base import BasePdfExtractor
from doc_classifier.tracing.session import TraceSession


class PdfExtractor(BaseExtractor):
    """Delegates to the configured PDF engine adapter."""

    method = "PDF Parser"
    trace_step = "extract_text_pdf"

    def __init__(self, engine: BasePdfExtractor) -> None:
        self._engine = engine

    def extract(
        self,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        pdf = self._engine.extract(content)
        return ExtractedContent(text=pdf.text, page_count=pdf.page_count)
