from typing import ClassVar

from doc_classifier.completion.client_base import BaseCompletionClient
from doc_classifier.completion.example_client_adapter import ExampleClientAdapter
from doc_classifier.completion.openai_client_adapter import OpenAIClientAdapter
from doc_classifier.config.settings import Settings


class CompletionClientFactory:
    """Creates the configured chat completion client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseCompletionClient:
        """Create a completion client from application settings."""
        provider = settings.completion_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.openai_base_url.strip() or None
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.openai_base_url.strip() or default_base_url
        supported = ["example", "openai", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]
        raise ValueError(
            f"Unknown completion provider '{provider}'. Choose from: {supported}"
        )
