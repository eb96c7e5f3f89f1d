from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_MIME_TYPES = [
    "application/pdf",
    "image/jpeg",
    "image/jpg",
    "image/png",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "text/csv",
    "application/csv",
    "application/octet-stream",
    "text/plain",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    max_file_size_bytes: int = 10 * 1024 * 1024
    allowed_mime_types: list[str] = DEFAULT_ALLOWED_MIME_TYPES

    fetch_timeout_seconds: float = 30.0
    fetch_max_bytes: int = 50 * 1024 * 1024

    pdf_engine: str = "pdfplumber"

    completion_provider: str = "openai"
    openai_api_key: str = ""
    openai_base_url: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60
    openai_temperature: float = 0.0

    vision_max_tokens: int = 2000
    classification_max_chars: int = 3000
    summary_max_chars: int = 4000

    prompt_service_url: str = ""
    prompt_service_api_key: str = ""
    prompt_service_timeout_seconds: float = 5.0
    prompt_cache_enabled: bool = False

    tracing_enabled: bool = True
