import math
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

from doc_classifier.analysis.models import ClassificationResult, SummaryResult

WORDS_PER_MINUTE = 200


def count_words(text: str) -> int:
    return len(text.split())


@dataclass(frozen=True)
class ProcessingMetadata:
    """Derived facts about one processed document. Informational only."""

    processed_at: str
    content_length: int
    char_count: int
    word_count: int
    estimated_reading_time_minutes: int
    extraction_method: str
    source: dict[str, object] = field(default_factory=dict)
    page_count: int | None = None
    processing_time_ms: int = 0

    @classmethod
    def build(
        cls,
        text: str,
        *,
        extraction_method: str,
        source: dict[str, object],
        page_count: int | None = None,
        processing_time_ms: int = 0,
    ) -> "ProcessingMetadata":
        words = count_words(text)
        return cls(
            processed_at=datetime.now(timezone.utc).isoformat(),
            content_length=len(text),
            char_count=len(text),
            word_count=words,
            estimated_reading_time_minutes=math.ceil(words / WORDS_PER_MINUTE),
            extraction_method=extraction_method,
            source=source,
            page_count=page_count,
            processing_time_ms=processing_time_ms,
        )

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ProcessingResult:
    """Everything returned to the client for one successfully processed document."""

    classification: ClassificationResult
    summary: SummaryResult
    metadata: ProcessingMetadata

    def to_dict(self) -> dict[str, object]:
        return {
            "classification": self.classification.to_dict(),
            "summary": self.summary.to_dict(),
            "metadata": self.metadata.to_dict(),
        }
