class DocumentExtractionError(Exception):
    """Base exception for everything that can go wrong turning a document into text."""


class FetchError(DocumentExtractionError):
    """Raised when a remote document cannot be downloaded."""


class ExtractionError(DocumentExtractionError):
    """Raised when a format extractor fails; carries the extraction method name."""

    def __init__(self, method: str, message: str) -> None:
        super().__init__(f"{method} failed: {message}")
        self.method = method


class EmptyExtractionError(DocumentExtractionError):
    """Raised when extraction produced no text at all."""

    DEFAULT_MESSAGE = (
        "No text could be extracted from the document. "
        "Please verify the file is valid and contains readable text."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)


class UnsupportedFormatError(DocumentExtractionError):
    """Raised when no extractor handles the content type and text decoding fails."""
