from dataclasses import dataclass

from doc_classifier.extraction.content_types import ContentType


@dataclass(frozen=True)
class RawDocument:
    """A document as received at ingress: either bytes or a URL."""

    content: bytes | None = None
    url: str | None = None
    mime_type: str | None = None
    filename: str | None = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.url is None):
            raise ValueError("RawDocument needs exactly one of content or url")

    @classmethod
    def from_bytes(
        cls,
        content: bytes,
        mime_type: str | None = None,
        filename: str | None = None,
    ) -> "RawDocument":
        return cls(content=content, mime_type=mime_type, filename=filename)

    @classmethod
    def from_url(cls, url: str, mime_type: str | None = None) -> "RawDocument":
        return cls(url=url, mime_type=mime_type)

    @property
    def is_remote(self) -> bool:
        return self.url is not None

    def source_info(self) -> dict[str, object]:
        """Describe where the document came from, for response metadata."""
        if self.url is not None:
            return {"type": "url", "url": self.url}
        return {
            "type": "file",
            "name": self.filename,
            "size": len(self.content or b""),
            "mime_type": self.mime_type,
        }


@dataclass(frozen=True)
class FetchedDocument:
    """Bytes downloaded from a URL plus the type the server reported."""

    content: bytes
    mime_type: str | None
    url: str


@dataclass(frozen=True)
class ExtractedContent:
    """What an extractor hands back to the dispatcher before normalization."""

    text: str
    page_count: int | None = None


@dataclass(frozen=True)
class ExtractionResult:
    """Normalized dispatcher output: trimmed, never empty."""

    text: str
    content_type: ContentType
    method: str
    mime_type: str | None = None
    page_count: int | None = None
