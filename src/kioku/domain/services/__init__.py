"""Domain services."""

from kioku.domain.services.addressing import extract_addressed_text, is_addressed
from kioku.domain.services.protocols import (
    MemorySummarizer,
    MessagingService,
    ResponseGenerator,
    ShortTermContextProvider,
)

__all__ = [
    "MemorySummarizer",
    "MessagingService",
    "ResponseGenerator",
    "ShortTermContextProvider",
    "extract_addressed_text",
    "is_addressed",
]
