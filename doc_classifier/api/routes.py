import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from doc_classifier import __version__
from doc_classifier.api.errors import error_response
from doc_classifier.config.settings import Settings
from doc_classifier.extraction.content_types import is_supported_mime_type
from doc_classifier.extraction.models import RawDocument
from doc_classifier.logging.logger import Log
from doc_classifier.processor.exceptions import DocumentValidationError, FileTooLargeError
from doc_classifier.processor.processor import DocumentProcessor

router = APIRouter()


@router.post("/process-document")
async def process_document(request: Request) -> JSONResponse:
    """Accept a multipart upload (field ``document``) or JSON ``{"url": ...}``."""
    started = time.monotonic()
    processor: DocumentProcessor = request.app.state.processor
    settings: Settings = request.app.state.settings
    Log.info("New document processing request")
    try:
        document = await _read_document(request, settings)
        result = await run_in_threadpool(processor.process, document)
    except Exception as exc:
        return error_response(exc, round((time.monotonic() - started) * 1000))
    return JSONResponse({"success": True, "data": result.to_dict()})


@router.get("/health")
def health_check(request: Request) -> dict[str, object]:
    settings: Settings = request.app.state.settings
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - request.app.state.started_at, 3),
        "tracing_enabled": settings.tracing_enabled,
    }


@router.get("/info")
def info(request: Request) -> dict[str, object]:
    settings: Settings = request.app.state.settings
    return {
        "supported_file_types": settings.allowed_mime_types,
        "max_file_size": settings.max_file_size_bytes,
        "max_file_size_mb": round(settings.max_file_size_bytes / 1024 / 1024),
        "version": __version__,
        "features": {
            "tracing": settings.tracing_enabled,
            "ai_classification": bool(settings.openai_api_key)
            or settings.completion_provider == "example",
            "vision_ai_support": True,
            "url_processing": True,
        },
    }


async def _read_document(request: Request, settings: Settings) -> RawDocument:
    upload: UploadFile | None = None
    url: object = None

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        field = form.get("document")
        upload = field if isinstance(field, UploadFile) else None
        url = form.get("url")
    elif "json" in content_type:
        try:
            body = await request.json()
        except ValueError as exc:
            raise DocumentValidationError("Request body is not valid JSON") from exc
        if isinstance(body, dict):
            url = body.get("url")

    has_url = isinstance(url, str) and bool(url.strip())
    if upload is None and not has_url:
        raise DocumentValidationError("You must send a file or a URL")
    if upload is not None and has_url:
        raise DocumentValidationError("Send either a file or a URL, not both")

    if upload is None:
        url = str(url).strip()
        if not url.startswith(("http://", "https://")):
            raise DocumentValidationError(f"URL must start with http:// or https://: {url}")
        Log.info(f"Processing URL: {url}")
        return RawDocument.from_url(url)

    mime_type = upload.content_type or "application/octet-stream"
    if not is_supported_mime_type(mime_type, settings.allowed_mime_types):
        raise DocumentValidationError(f"File type not allowed: {mime_type}")
    content = await upload.read()
    if len(content) > settings.max_file_size_bytes:
        raise FileTooLargeError(
            f"File is {len(content)} bytes, maximum allowed is "
            f"{settings.max_file_size_bytes} bytes"
        )
    Log.info(f"Processing file: {upload.filename} ({mime_type})")
    return RawDocument.from_bytes(content, mime_type=mime_type, filename=upload.filename)
