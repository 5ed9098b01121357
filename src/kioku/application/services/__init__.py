"""Application services."""

from kioku.application.services.background_memory import BackgroundMemoryUpdater
from kioku.application.services.keyed_lock import KeyedLock
from kioku.application.services.long_term_memory import (
    LongTermMemoryManager,
    truncate_summary,
)
from kioku.application.services.reply_generator import ReplyGenerator

__all__ = [
    "BackgroundMemoryUpdater",
    "KeyedLock",
    "LongTermMemoryManager",
    "ReplyGenerator",
    "truncate_summary",
]
