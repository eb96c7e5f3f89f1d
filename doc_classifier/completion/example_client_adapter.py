"""Example completion client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in CompletionClientFactory.
"""

import json
from typing import ClassVar

from doc_classifier.completion.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Example adapter that answers without any network call.

    JSON requests get a fixed classification-and-summary shaped object, plain
    requests (vision) get a fixed sentence. Useful for local development and
    tests.
    """

    DEFAULT_JSON_RESPONSE: ClassVar[dict[str, object]] = {
        "category": "Other",
        "subcategory": None,
        "confidence": "low",
        "explanation": "Example provider does not analyze content.",
        "detected_language": "unknown",
        "keywords": [],
        "main_purpose": "",
        "key_points": [],
        "important_details": {"dates": [], "amounts": [], "parties": [], "locations": []},
        "action_items": [],
        "summary": "",
        "urgency_level": "low",
        "requires_follow_up": False,
    }
    DEFAULT_TEXT_RESPONSE: ClassVar[str] = "Example provider image description."

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, object]],
        json_response: bool = False,
        max_tokens: int | None = None,
    ) -> str:
        _ = model, temperature, messages, max_tokens
        if json_response:
            return json.dumps(self.DEFAULT_JSON_RESPONSE)
        return self.DEFAULT_TEXT_RESPONSE
