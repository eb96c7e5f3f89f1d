from abc import ABC, abstractmethod

from doc_classifier.extraction.models import ExtractedContent
from doc_classifier.tracing.session import TraceSession

# Compound File Binary container used by legacy Office formats (.xls, .doc).
OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


class BaseExtractor(ABC):
    """Contract for format extractors: raw bytes in, text out."""

    method: str = ""
    trace_step: str = ""

    @abstractmethod
    def extract(
        self,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        """Convert document bytes into text.

        Raises:
            UnsupportedFormatError: the payload is a format the extractor
                recognizes but cannot read.
            Exception: any other library failure; the dispatcher wraps it in
                ExtractionError.
        """
