import csv
import io

from doc_classifier.extraction.base import BaseExtractor
from doc_classifier.extraction.models import ExtractedContent
from doc_classifier.extraction.tabular import rows_to_csv
from doc_classifier.logging.logger import Log
from doc_classifier.tracing.session import TraceSession


class CsvExtractor(BaseExtractor):
    """Parses CSV strictly; malformed input falls back to the raw decoded text."""

    method = "CSV Parser"
    trace_step = "extract_text_csv"

    def extract(
        self,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        try:
            text = content.decode("utf-8-sig")
            rows = list(csv.reader(io.StringIO(text, newline=""), strict=True))
        except (UnicodeDecodeError, csv.Error) as exc:
            Log.warning(f"CSV parser failed, reading as plain text: {exc}")
            return ExtractedContent(text=content.decode("utf-8", errors="replace"))
        return ExtractedContent(text=rows_to_csv(rows))
