"""LLM-related exceptions."""


class LLMError(Exception):
    """Base exception for LLM-related errors."""


class LLMRateLimitError(LLMError):
    """Rate limit exceeded error."""


class LLMAuthenticationError(LLMError):
    """Authentication error (invalid API key, etc.)."""


class LLMTimeoutError(LLMError):
    """The completion did not finish within the configured timeout."""
