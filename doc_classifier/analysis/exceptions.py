class AgentError(Exception):
    """Raised when classification or summarization fails."""

    hint = "Verify that the file is valid and that your OpenAI API key is configured"


class AgentAuthenticationError(AgentError):
    """The completion provider rejected the API key."""

    hint = "Error with OpenAI API key. Verify that it is configured correctly."


class AgentQuotaError(AgentError):
    """The completion provider account has no remaining quota."""

    hint = "You have reached your OpenAI account limit. Check your balance."


class AgentRateLimitError(AgentError):
    """The completion provider throttled the request."""

    hint = "Too many requests too fast. Wait a moment and try again."


class AgentResponseError(AgentError):
    """The model answered with something that is not a JSON object."""
