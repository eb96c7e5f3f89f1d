class CompletionError(Exception):
    """Raised when a chat completion call fails."""


class CompletionNetworkError(CompletionError):
    """Raised when the AI provider cannot be reached or times out."""


class CompletionAuthenticationError(CompletionError):
    """Raised when the AI provider rejects the configured credentials."""


class CompletionQuotaError(CompletionError):
    """Raised when the AI provider account has no remaining quota."""


class CompletionRateLimitError(CompletionError):
    """Raised when the AI provider throttles the request."""
