from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, object]],
        json_response: bool = False,
        max_tokens: int | None = None,
    ) -> str:
        """Return the content of the first completion choice as plain text.

        Raises:
            CompletionError: or one of its subclasses on any failure.
        """
