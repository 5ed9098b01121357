"""Common fixtures for persistence tests."""

import pytest
from sqlalchemy import event

from kioku.infrastructure.persistence import (
    DatabaseManager,
    SQLiteTurnRepository,
    SQLiteUserMemoryRepository,
)


@pytest.fixture
async def db_manager() -> DatabaseManager:
    """Create an in-memory database manager."""
    manager = DatabaseManager(":memory:")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
def turn_repository(db_manager: DatabaseManager) -> SQLiteTurnRepository:
    """Create a turn repository instance."""
    return SQLiteTurnRepository(db_manager.get_session)


@pytest.fixture
def user_memory_repository(db_manager: DatabaseManager) -> SQLiteUserMemoryRepository:
    """Create a user memory repository instance."""
    return SQLiteUserMemoryRepository(db_manager.get_session)


@pytest.fixture
def executed_sql(db_manager: DatabaseManager) -> list[str]:
    """Record every SQL statement sent to the database."""
    statements: list[str] = []

    def record(conn, cursor, statement, parameters, context, executemany) -> None:
        statements.append(statement)

    engine = db_manager.get_engine().sync_engine
    event.listen(engine, "before_cursor_execute", record)
    yield statements
    event.remove(engine, "before_cursor_execute", record)
