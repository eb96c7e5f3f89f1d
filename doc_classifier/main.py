import uvicorn

from doc_classifier.api.app import create_app
from doc_classifier.config.settings import Settings
from doc_classifier.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build dependencies -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    if not settings.openai_api_key and settings.completion_provider != "example":
        Log.warning("OPENAI_API_KEY is not configured; AI calls will fail")

    app = create_app(settings)
    Log.info(f"Starting server on http://{settings.host}:{settings.port}")
    Log.info(f"Supported file types: {len(settings.allowed_mime_types)}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
