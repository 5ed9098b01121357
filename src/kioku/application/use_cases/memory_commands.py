"""Memory administration commands."""

import logging

from kioku.application.services import LongTermMemoryManager
from kioku.domain.repositories import TurnRepository

logger = logging.getLogger(__name__)

NO_MEMORY_MESSAGE = "No long-term memory stored yet."
MEMORY_ERASED_MESSAGE = "Your long-term memory was erased."
CHANNEL_RESET_MESSAGE = "This channel's short-term memory was cleared."


class MemoryCommandsUseCase:
    """Use case behind the /memory, /forget and /reset commands.

    Each command returns the confirmation text shown only to the
    invoking user.
    """

    def __init__(
        self,
        memory_manager: LongTermMemoryManager,
        turn_repository: TurnRepository,
    ) -> None:
        """Initialize the use case.

        Args:
            memory_manager: Long-term memory manager.
            turn_repository: Repository for the channel transcript.
        """
        self._memory_manager = memory_manager
        self._turn_repository = turn_repository

    async def show_memory(self, user_id: str) -> str:
        """Return the user's long-term summary."""
        summary = await self._memory_manager.read(user_id)
        return summary or NO_MEMORY_MESSAGE

    async def forget_memory(self, user_id: str) -> str:
        """Erase the user's long-term summary."""
        await self._memory_manager.erase(user_id)
        return MEMORY_ERASED_MESSAGE

    async def reset_channel(self, channel_id: str) -> str:
        """Delete the channel's short-term history."""
        deleted = await self._turn_repository.delete_by_channel(channel_id)
        logger.info("Reset channel %s: %d turn(s) deleted", channel_id, deleted)
        return CHANNEL_RESET_MESSAGE
