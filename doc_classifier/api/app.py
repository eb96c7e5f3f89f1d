import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from doc_classifier import __version__
from doc_classifier.api.routes import router
from doc_classifier.config.settings import Settings
from doc_classifier.processor.processor import DocumentProcessor, build_processor


def create_app(settings: Settings, processor: DocumentProcessor | None = None) -> FastAPI:
    """Build the HTTP application around a DocumentProcessor."""
    app = FastAPI(title="Document Classifier API", version=__version__)
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)
    app.state.started_at = time.monotonic()

    @app.middleware("http")
    async def api_prefix_alias(request: Request, call_next):  # type: ignore[no-untyped-def]
        """Accept both `/path` and `/api/path` for frontend compatibility."""
        if request.scope.get("path", "").startswith("/api/"):
            request.scope["path"] = request.scope["path"][4:]
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app
