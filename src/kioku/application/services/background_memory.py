"""Background long-term memory updates."""

import asyncio
import logging

from kioku.application.services.long_term_memory import LongTermMemoryManager

logger = logging.getLogger(__name__)


class BackgroundMemoryUpdater:
    """Run long-term memory updates as background tasks.

    Updates are best-effort: any failure is logged and never reaches
    the conversation that scheduled it. Pending updates are awaited
    (then cancelled after a timeout) on shutdown.
    """

    def __init__(self, memory_manager: LongTermMemoryManager) -> None:
        """Initialize BackgroundMemoryUpdater.

        Args:
            memory_manager: Manager that performs the update.
        """
        self._memory_manager = memory_manager
        self._tasks: set[asyncio.Task[None]] = set()
        self._stopped = False

    def schedule(self, user_id: str, message_text: str) -> asyncio.Task[None] | None:
        """Schedule a memory update for a user.

        Args:
            user_id: User whose summary is updated.
            message_text: Raw text of the user's message.

        Returns:
            The created task, or None if the updater is stopped.
        """
        if self._stopped:
            logger.warning(
                "Memory update for user %s dropped: updater is stopped", user_id
            )
            return None

        task = asyncio.create_task(self._run(user_id, message_text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, user_id: str, message_text: str) -> None:
        try:
            await self._memory_manager.update(user_id, message_text)
        except asyncio.CancelledError:
            logger.warning("Memory update cancelled: user=%s", user_id)
            raise
        except Exception:
            logger.exception("Error during memory update: user=%s", user_id)

    async def drain(self) -> None:
        """Wait until all scheduled updates have finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def stop(self, timeout: float = 5.0) -> bool:
        """Stop accepting updates and wait for pending ones.

        Args:
            timeout: Maximum seconds to wait before cancelling.

        Returns:
            True if all pending updates finished, False if some were cancelled.
        """
        logger.info("Stopping background memory updater")
        self._stopped = True
        try:
            await asyncio.wait_for(self.drain(), timeout=timeout)
            return True
        except asyncio.TimeoutError:
            logger.warning(
                "Cancelling %d pending memory update(s)", len(self._tasks)
            )
            for task in list(self._tasks):
                task.cancel()
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
            return False

    @property
    def pending_count(self) -> int:
        """Number of updates not yet finished."""
        return len(self._tasks)
