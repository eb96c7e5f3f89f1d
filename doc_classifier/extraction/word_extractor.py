import io

import docx

from doc_classifier.extraction.base import OLE2_SIGNATURE, BaseExtractor
from doc_classifier.extraction.exceptions import UnsupportedFormatError
from doc_classifier.extraction.models import ExtractedContent
from doc_classifier.tracing.session import TraceSession


class WordExtractor(BaseExtractor):
    """Raw text of a .docx file: paragraphs, then table rows. Styling is dropped."""

    method = "Word Document Parser"
    trace_step = "extract_text_word"

    def extract(
        self,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        if content.startswith(OLE2_SIGNATURE):
            raise UnsupportedFormatError("Legacy .doc files are not supported; save as .docx")
        document = docx.Document(io.BytesIO(content))
        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                lines.append("\t".join(cell.text for cell in row.cells))
        return ExtractedContent(text="\n".join(lines))
