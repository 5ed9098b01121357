"""SQLite implementation of UserMemoryRepository."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel.ext.asyncio.session import AsyncSession

from kioku.domain.entities import UserMemory
from kioku.infrastructure.persistence.database import store_errors
from kioku.infrastructure.persistence.datetime_utils import normalize_to_utc, utc_now
from kioku.infrastructure.persistence.models import UserMemoryModel


class SQLiteUserMemoryRepository:
    """SQLite による長期記憶リポジトリ実装

    user_id を主キーとし、ユーザーにつき1行だけを保持する。
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ) -> None:
        """初期化

        Args:
            session_factory: 非同期セッション生成関数
        """
        self._session_factory = session_factory

    async def get_summary(self, user_id: str) -> str:
        """ユーザーの要約を取得する（存在しない場合は空文字列）"""
        memory = await self.find_by_user_id(user_id)
        return memory.summary if memory else ""

    async def find_by_user_id(self, user_id: str) -> UserMemory | None:
        """ユーザー ID で長期記憶を検索

        Args:
            user_id: ユーザー ID

        Returns:
            見つかった長期記憶、または None
        """
        with store_errors("find_user_memory"):
            async with self._session_factory() as session:
                model = await session.get(UserMemoryModel, user_id)
                return self._to_entity(model) if model else None

    async def upsert(self, user_id: str, summary: str) -> UserMemory:
        """要約を保存（upsert）

        INSERT ... ON CONFLICT DO UPDATE の1文で実行する。
        同じ user_id の記憶が存在する場合は要約を丸ごと置き換え、
        内容が同じでも更新日時を更新する。

        Args:
            user_id: ユーザー ID
            summary: 保存する要約

        Returns:
            保存された長期記憶
        """
        updated_at = utc_now()
        stmt = sqlite_insert(UserMemoryModel).values(
            user_id=user_id, summary=summary, updated_at=updated_at
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={"summary": summary, "updated_at": updated_at},
        )
        with store_errors("upsert_user_memory"):
            async with self._session_factory() as session:
                await session.execute(stmt)
                await session.commit()
        return UserMemory(user_id=user_id, summary=summary, updated_at=updated_at)

    async def delete(self, user_id: str) -> bool:
        """ユーザーの長期記憶を削除

        Args:
            user_id: ユーザー ID

        Returns:
            削除した場合 True（存在しなくてもエラーにしない）
        """
        with store_errors("delete_user_memory"):
            async with self._session_factory() as session:
                model = await session.get(UserMemoryModel, user_id)
                if model is None:
                    return False
                await session.delete(model)
                await session.commit()
                return True

    def _to_entity(self, model: UserMemoryModel) -> UserMemory:
        """UserMemoryModel を UserMemory エンティティに変換"""
        return UserMemory(
            user_id=model.user_id,
            summary=model.summary,
            updated_at=normalize_to_utc(model.updated_at),
        )
