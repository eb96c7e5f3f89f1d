from doc_classifier.completion.client_base import BaseCompletionClient
from doc_classifier.completion.factory import CompletionClientFactory
from doc_classifier.completion.openai_client_adapter import OpenAIClientAdapter

__all__ = ["BaseCompletionClient", "CompletionClientFactory", "OpenAIClientAdapter"]
