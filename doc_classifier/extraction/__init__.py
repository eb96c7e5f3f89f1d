from doc_classifier.extraction.content_types import ContentType, classify_mime
from doc_classifier.extraction.dispatcher import ExtractionDispatcher
from doc_classifier.extraction.factory import build_dispatcher
from doc_classifier.extraction.models import ExtractionResult, RawDocument

__all__ = [
    "ContentType",
    "ExtractionDispatcher",
    "ExtractionResult",
    "RawDocument",
    "build_dispatcher",
    "classify_mime",
]
