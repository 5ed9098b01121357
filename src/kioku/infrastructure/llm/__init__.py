"""LLM integration."""

from kioku.infrastructure.llm.client import LLMClient
from kioku.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from kioku.infrastructure.llm.memory_summarizer import LLMMemorySummarizer
from kioku.infrastructure.llm.response_generator import LiteLLMResponseGenerator

__all__ = [
    "LLMAuthenticationError",
    "LLMClient",
    "LLMError",
    "LLMMemorySummarizer",
    "LLMRateLimitError",
    "LLMTimeoutError",
    "LiteLLMResponseGenerator",
]
