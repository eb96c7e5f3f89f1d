class ProcessorError(Exception):
    """Base exception for request-level processing errors."""


class DocumentValidationError(ProcessorError):
    """Raised when a request carries no usable input. Always user-correctable."""

    status_code = 400


class FileTooLargeError(DocumentValidationError):
    """Raised when an upload exceeds the configured size limit."""

    status_code = 413
