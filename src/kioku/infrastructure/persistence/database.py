"""Database management."""

import logging
from collections.abc import AsyncGenerator, Iterator
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from kioku.domain.exceptions import StoreError

# Import models to register them with SQLModel metadata
from kioku.infrastructure.persistence import models as _models  # noqa: F401

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """SQLAlchemy の例外を StoreError に変換する

    Args:
        operation: ログとエラーメッセージに使う操作名

    Raises:
        StoreError: ブロック内で SQLAlchemyError が発生した場合
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Store operation '%s' failed: %s", operation, e)
        raise StoreError(f"{operation} failed: {e}") from e


class DatabaseManager:
    """データベース管理

    SQLite データベースの初期化、エンジン生成、セッション管理を行う。
    aiosqlite を使用した非同期アクセスをサポート。
    エンジン（コネクションプール）はプロセス内で1つだけ生成し、
    すべてのリポジトリで共有する。
    """

    def __init__(self, database_path: str) -> None:
        """初期化

        Args:
            database_path: SQLite データベースファイルのパス
                          ":memory:" を指定するとインメモリDBを使用
        """
        self._database_path = database_path
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    def get_engine(self) -> AsyncEngine:
        """SQLAlchemy 非同期エンジンを取得する

        エンジンは遅延初期化され、キャッシュされる。
        データベースファイルの親ディレクトリが存在しない場合は自動作成する。

        Returns:
            AsyncEngine インスタンス
        """
        if self._engine is not None:
            return self._engine

        # Create parent directory for non-memory databases
        if self._database_path != ":memory:":
            db_path = Path(self._database_path)
            db_path.parent.mkdir(parents=True, exist_ok=True)
            url = f"sqlite+aiosqlite:///{self._database_path}"
        else:
            url = "sqlite+aiosqlite:///:memory:"

        self._engine = create_async_engine(url)
        self._session_factory = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False
        )
        return self._engine

    async def create_tables(self) -> None:
        """テーブルを作成する

        既存のテーブルがある場合は何もしない。
        """
        engine = self.get_engine()
        with store_errors("create_tables"):
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """セッションを取得する（async context manager）

        Yields:
            AsyncSession インスタンス
        """
        self.get_engine()  # Ensures _session_factory is initialized
        assert self._session_factory is not None
        async with self._session_factory() as session:
            yield session

    async def close(self) -> None:
        """エンジンを破棄してコネクションを閉じる"""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
