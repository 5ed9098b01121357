"""Tests for DatabaseManager."""

from pathlib import Path

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from kioku.domain.exceptions import StoreError
from kioku.infrastructure.persistence import DatabaseManager, store_errors


class TestDatabaseManager:
    """DatabaseManager tests."""

    def test_get_engine_creates_parent_directory(self, tmp_path: Path) -> None:
        """Test that parent directory is created if not exists."""
        db_path = tmp_path / "subdir" / "nested" / "test.db"
        manager = DatabaseManager(str(db_path))

        engine = manager.get_engine()

        assert "sqlite" in str(engine.url)
        assert db_path.parent.exists()

    def test_get_engine_is_cached(self) -> None:
        """Test that the engine is created once."""
        manager = DatabaseManager(":memory:")

        assert manager.get_engine() is manager.get_engine()

    async def test_create_tables(self, tmp_path: Path) -> None:
        """Test table creation, twice in a row."""
        manager = DatabaseManager(str(tmp_path / "test.db"))
        await manager.create_tables()
        await manager.create_tables()

        async with manager.get_engine().connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names()
            )

        assert "turns" in tables
        assert "user_memories" in tables
        await manager.close()

    async def test_close_disposes_engine(self) -> None:
        """Test that close resets the engine and allows re-creation."""
        manager = DatabaseManager(":memory:")
        engine = manager.get_engine()

        await manager.close()

        assert manager.get_engine() is not engine
        await manager.close()


class TestStoreErrors:
    """store_errors tests."""

    def test_translates_sqlalchemy_errors(self) -> None:
        """Test that SQLAlchemy errors become StoreError."""
        with pytest.raises(StoreError, match="append_turn"):
            with store_errors("append_turn"):
                raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    def test_other_errors_pass_through(self) -> None:
        """Test that unrelated errors are not translated."""
        with pytest.raises(KeyError):
            with store_errors("append_turn"):
                raise KeyError("x")
