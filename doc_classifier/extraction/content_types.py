"""Content type classification.

MIME strings are mapped onto a closed ``ContentType`` enum by substring, in a
fixed precedence order. Extractor selection only ever sees the enum.
"""

from enum import Enum

UNDECLARED_MIME_TYPES = frozenset({"", "application/octet-stream"})


class ContentType(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    WORD = "word"
    SPREADSHEET = "spreadsheet"
    CSV = "csv"
    TEXT = "text"
    UNKNOWN = "unknown"


# Order matters: "application/vnd.ms-excel" must hit SPREADSHEET before CSV,
# "text/csv" must hit CSV before TEXT.
_MIME_MARKERS: tuple[tuple[ContentType, tuple[str, ...]], ...] = (
    (ContentType.PDF, ("pdf",)),
    (ContentType.IMAGE, ("image",)),
    (ContentType.WORD, ("word", "docx")),
    (ContentType.SPREADSHEET, ("excel", "spreadsheet")),
    (ContentType.CSV, ("csv",)),
    (ContentType.TEXT, ("text", "plain")),
)

PROCESSING_METHODS: dict[ContentType, str] = {
    ContentType.PDF: "PDF Parser",
    ContentType.IMAGE: "Vision Model",
    ContentType.WORD: "Word Document Parser",
    ContentType.SPREADSHEET: "Excel Parser",
    ContentType.CSV: "CSV Parser",
    ContentType.TEXT: "Text Parser",
    ContentType.UNKNOWN: "Automatic Text Detection",
}

# Rough per-KB processing cost in milliseconds.
_MS_PER_KB: dict[ContentType, int] = {
    ContentType.PDF: 100,
    ContentType.IMAGE: 200,
    ContentType.WORD: 50,
    ContentType.SPREADSHEET: 75,
    ContentType.CSV: 25,
    ContentType.TEXT: 10,
    ContentType.UNKNOWN: 10,
}


def normalize_mime(mime_type: str | None) -> str:
    """Lower-case a MIME string and drop parameters such as ``charset``."""
    if not mime_type:
        return ""
    return mime_type.split(";", 1)[0].strip().lower()


def is_declared(mime_type: str | None) -> bool:
    """False for missing MIME types and for the generic binary type."""
    return normalize_mime(mime_type) not in UNDECLARED_MIME_TYPES


def classify_mime(mime_type: str | None) -> ContentType:
    """Map a MIME string onto exactly one ContentType."""
    normalized = normalize_mime(mime_type)
    for content_type, markers in _MIME_MARKERS:
        if any(marker in normalized for marker in markers):
            return content_type
    return ContentType.UNKNOWN


def is_supported_mime_type(mime_type: str | None, allowed: list[str]) -> bool:
    return normalize_mime(mime_type) in {normalize_mime(a) for a in allowed}


def processing_method(content_type: ContentType) -> str:
    return PROCESSING_METHODS[content_type]


def estimate_processing_time_ms(file_size: int, mime_type: str | None) -> int:
    """Estimate extraction time from file size and type."""
    return round(file_size / 1024 * _MS_PER_KB[classify_mime(mime_type)])
