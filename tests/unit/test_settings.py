import pytest
from pydantic import ValidationError

from doc_classifier.config.settings import DEFAULT_ALLOWED_MIME_TYPES, Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_max_file_size_is_ten_megabytes(self) -> None:
        s = Settings()
        assert s.max_file_size_bytes == 10 * 1024 * 1024

    def test_default_fetch_limits(self) -> None:
        s = Settings()
        assert s.fetch_timeout_seconds == 30.0
        assert s.fetch_max_bytes == 50 * 1024 * 1024

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_model_parameters(self) -> None:
        s = Settings()
        assert s.openai_model_name == "gpt-4o-mini"
        assert s.openai_temperature == 0.0
        assert s.vision_max_tokens == 2000

    def test_default_truncation_budgets(self) -> None:
        s = Settings()
        assert s.classification_max_chars == 3000
        assert s.summary_max_chars == 4000

    def test_default_allowed_types(self) -> None:
        s = Settings()
        assert s.allowed_mime_types == DEFAULT_ALLOWED_MIME_TYPES
        assert "application/csv" in s.allowed_mime_types
        assert "application/octet-stream" in s.allowed_mime_types

    def test_prompt_cache_disabled_by_default(self) -> None:
        s = Settings()
        assert s.prompt_cache_enabled is False


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_max_file_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "2048")
        s = Settings()
        assert s.max_file_size_bytes == 2048

    def test_loads_allowed_types_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_MIME_TYPES", '["application/pdf"]')
        s = Settings()
        assert s.allowed_mime_types == ["application/pdf"]

    def test_loads_prompt_service_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROMPT_SERVICE_URL", "http://prompts.internal")
        s = Settings()
        assert s.prompt_service_url == "http://prompts.internal"


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_tracing_flag_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACING_ENABLED", "sometimes")
        with pytest.raises(ValidationError):
            Settings()
