"""Domain repositories."""

from kioku.domain.repositories.turn_repository import TurnRepository
from kioku.domain.repositories.user_memory_repository import UserMemoryRepository

__all__ = [
    "TurnRepository",
    "UserMemoryRepository",
]
