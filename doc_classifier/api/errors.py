"""Conversion of pipeline exceptions into the JSON error envelope."""

from fastapi.responses import JSONResponse

from doc_classifier.analysis.exceptions import AgentError
from doc_classifier.extraction.exceptions import FetchError, UnsupportedFormatError
from doc_classifier.logging.logger import Log
from doc_classifier.processor.exceptions import DocumentValidationError

INPUT_HINT = 'Use form-data with key "document" for files, or JSON with key "url" for URLs'
DEFAULT_HINT = "Verify that the file is valid and that your OpenAI API key is configured"


def error_response(exc: Exception, processing_time_ms: int) -> JSONResponse:
    status_code, error, hint = _classify(exc)
    if status_code >= 500:
        Log.error(f"Error processing document: {exc}")
    else:
        Log.warning(f"Rejected request: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "details": str(exc) or type(exc).__name__,
            "processing_time_ms": processing_time_ms,
            "hint": hint,
        },
    )


def _classify(exc: Exception) -> tuple[int, str, str]:
    if isinstance(exc, DocumentValidationError):
        return exc.status_code, "Invalid request", INPUT_HINT
    if isinstance(exc, UnsupportedFormatError):
        return 415, "Unsupported document format", DEFAULT_HINT
    if isinstance(exc, FetchError):
        return 500, "Could not download the document", "Verify that the URL is reachable"
    if isinstance(exc, AgentError):
        return 500, "Error processing the document", exc.hint
    return 500, "Error processing the document", DEFAULT_HINT
