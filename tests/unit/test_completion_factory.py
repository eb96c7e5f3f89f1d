from unittest.mock import patch

import pytest

from doc_classifier.completion.example_client_adapter import ExampleClientAdapter
from doc_classifier.completion.factory import CompletionClientFactory
from doc_classifier.completion.openai_client_adapter import OpenAIClientAdapter
from doc_classifier.config.settings import Settings


class TestCompletionClientFactory:
    def test_creates_example_adapter(self) -> None:
        client = CompletionClientFactory.create(Settings(completion_provider="example"))
        assert isinstance(client, ExampleClientAdapter)

    def test_creates_openai_adapter(self) -> None:
        settings = Settings(completion_provider="openai", openai_api_key="sk-test")
        with patch("doc_classifier.completion.openai_client_adapter.openai.OpenAI") as mock_cls:
            client = CompletionClientFactory.create(settings)
        assert isinstance(client, OpenAIClientAdapter)
        assert mock_cls.call_args.kwargs["base_url"] is None

    def test_compatible_provider_uses_default_base_url(self) -> None:
        settings = Settings(completion_provider="Groq", openai_api_key="k")
        with patch("doc_classifier.completion.openai_client_adapter.openai.OpenAI") as mock_cls:
            CompletionClientFactory.create(settings)
        assert mock_cls.call_args.kwargs["base_url"] == "https://api.groq.com/openai/v1"

    def test_explicit_base_url_wins(self) -> None:
        settings = Settings(
            completion_provider="ollama", openai_base_url="http://gpu-box:11434/v1"
        )
        with patch("doc_classifier.completion.openai_client_adapter.openai.OpenAI") as mock_cls:
            CompletionClientFactory.create(settings)
        assert mock_cls.call_args.kwargs["base_url"] == "http://gpu-box:11434/v1"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown completion provider"):
            CompletionClientFactory.create(Settings(completion_provider="nope"))
