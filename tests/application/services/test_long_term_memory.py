"""Tests for LongTermMemoryManager."""

import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from kioku.application.services import (
    KeyedLock,
    LongTermMemoryManager,
    truncate_summary,
)
from kioku.domain.entities import UserMemory
from kioku.domain.exceptions import StoreError, SummarizationError


def stored(user_id: str, summary: str) -> UserMemory:
    return UserMemory(
        user_id=user_id, summary=summary, updated_at=datetime.now(timezone.utc)
    )


@pytest.fixture
def mock_repository() -> Mock:
    """Create a mock UserMemoryRepository."""
    repository = Mock()
    repository.get_summary = AsyncMock(return_value="")
    repository.upsert = AsyncMock(side_effect=stored)
    repository.delete = AsyncMock(return_value=True)
    return repository


@pytest.fixture
def mock_summarizer() -> Mock:
    """Create a mock MemorySummarizer."""
    summarizer = Mock()
    summarizer.summarize = AsyncMock(return_value="User likes Rust.")
    return summarizer


@pytest.fixture
def manager(mock_repository: Mock, mock_summarizer: Mock) -> LongTermMemoryManager:
    """Create a LongTermMemoryManager instance."""
    return LongTermMemoryManager(mock_repository, mock_summarizer, max_chars=100)


class TestTruncateSummary:
    """truncate_summary tests."""

    def test_short_summary_unchanged(self) -> None:
        """Test a summary within the limit."""
        assert truncate_summary("Likes Rust.", 100) == "Likes Rust."

    def test_cuts_at_word_boundary(self) -> None:
        """Test that words are not split."""
        assert truncate_summary("Likes Rust and hiking", 14) == "Likes Rust"

    def test_single_long_word(self) -> None:
        """Test a summary without spaces."""
        assert truncate_summary("abcdefghij", 4) == "abcd"


class TestRead:
    """read tests."""

    async def test_absent_user(
        self, manager: LongTermMemoryManager, mock_repository: Mock
    ) -> None:
        """Test that an absent summary reads as empty."""
        assert await manager.read("U1") == ""
        mock_repository.get_summary.assert_awaited_once_with("U1")


class TestErase:
    """erase tests."""

    async def test_erase(
        self, manager: LongTermMemoryManager, mock_repository: Mock
    ) -> None:
        """Test that erase deletes the record."""
        await manager.erase("U1")

        mock_repository.delete.assert_awaited_once_with("U1")

    async def test_erase_absent_succeeds(
        self, manager: LongTermMemoryManager, mock_repository: Mock
    ) -> None:
        """Test that erasing an absent summary succeeds."""
        mock_repository.delete.return_value = False

        await manager.erase("U1")

    async def test_erase_waits_for_user_lock(
        self,
        mock_repository: Mock,
        mock_summarizer: Mock,
    ) -> None:
        """Test that erase runs only after the user's key is released."""
        locks = KeyedLock()
        manager = LongTermMemoryManager(mock_repository, mock_summarizer, locks=locks)

        async with locks.acquire("U1"):
            erase_task = asyncio.create_task(manager.erase("U1"))
            await asyncio.sleep(0.01)
            mock_repository.delete.assert_not_awaited()

        await erase_task
        mock_repository.delete.assert_awaited_once_with("U1")


class TestUpdate:
    """update tests."""

    async def test_update_replaces_summary(
        self,
        manager: LongTermMemoryManager,
        mock_repository: Mock,
        mock_summarizer: Mock,
    ) -> None:
        """Test that the summarizer output replaces the stored summary."""
        mock_repository.get_summary.return_value = "Likes Go."

        result = await manager.update("U1", "I switched to Rust")

        assert result == "User likes Rust."
        mock_summarizer.summarize.assert_awaited_once_with(
            "Likes Go.", "I switched to Rust"
        )
        mock_repository.upsert.assert_awaited_once_with("U1", "User likes Rust.")

    async def test_summarizer_failure_keeps_summary(
        self,
        manager: LongTermMemoryManager,
        mock_repository: Mock,
        mock_summarizer: Mock,
    ) -> None:
        """Test that a failed summarization leaves the store untouched."""
        mock_summarizer.summarize.side_effect = SummarizationError("timeout")

        assert await manager.update("U1", "hello") is None
        mock_repository.upsert.assert_not_awaited()

    async def test_empty_output_keeps_current_text(
        self,
        manager: LongTermMemoryManager,
        mock_repository: Mock,
        mock_summarizer: Mock,
    ) -> None:
        """Test that blank output re-saves the current summary."""
        mock_repository.get_summary.return_value = "Likes Go."
        mock_summarizer.summarize.return_value = "  "

        result = await manager.update("U1", "ok")

        assert result == "Likes Go."
        mock_repository.upsert.assert_awaited_once_with("U1", "Likes Go.")

    async def test_output_is_truncated(
        self,
        mock_repository: Mock,
        mock_summarizer: Mock,
    ) -> None:
        """Test the stored summary length cap."""
        mock_summarizer.summarize.return_value = "word " * 50
        manager = LongTermMemoryManager(mock_repository, mock_summarizer, max_chars=20)

        result = await manager.update("U1", "hello")

        assert result is not None
        assert len(result) <= 20

    async def test_store_errors_propagate(
        self,
        manager: LongTermMemoryManager,
        mock_repository: Mock,
    ) -> None:
        """Test that store failures are not swallowed."""
        mock_repository.upsert.side_effect = StoreError("locked")

        with pytest.raises(StoreError):
            await manager.update("U1", "hello")

    async def test_updates_for_one_user_are_serialized(
        self, mock_summarizer: Mock
    ) -> None:
        """Test that concurrent updates never read a stale summary."""
        summaries: dict[str, str] = {}
        repository = Mock()

        async def get_summary(user_id: str) -> str:
            return summaries.get(user_id, "")

        async def upsert(user_id: str, summary: str) -> UserMemory:
            summaries[user_id] = summary
            return stored(user_id, summary)

        async def summarize(current: str, new_message: str) -> str:
            await asyncio.sleep(0.01)
            return f"{current}+{new_message}" if current else new_message

        repository.get_summary = AsyncMock(side_effect=get_summary)
        repository.upsert = AsyncMock(side_effect=upsert)
        mock_summarizer.summarize = AsyncMock(side_effect=summarize)
        manager = LongTermMemoryManager(repository, mock_summarizer)

        await asyncio.gather(manager.update("U1", "a"), manager.update("U1", "b"))

        assert summaries["U1"] == "a+b"
