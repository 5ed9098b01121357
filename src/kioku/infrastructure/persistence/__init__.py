"""Persistence infrastructure."""

from kioku.infrastructure.persistence.database import DatabaseManager, store_errors
from kioku.infrastructure.persistence.models import TurnModel, UserMemoryModel
from kioku.infrastructure.persistence.short_term_context import (
    DBShortTermContextProvider,
)
from kioku.infrastructure.persistence.turn_repository import SQLiteTurnRepository
from kioku.infrastructure.persistence.user_memory_repository import (
    SQLiteUserMemoryRepository,
)

__all__ = [
    "DBShortTermContextProvider",
    "DatabaseManager",
    "SQLiteTurnRepository",
    "SQLiteUserMemoryRepository",
    "TurnModel",
    "UserMemoryModel",
    "store_errors",
]
