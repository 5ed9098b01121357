"""SQLite implementation of TurnRepository."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from kioku.domain.entities import Role, Turn
from kioku.infrastructure.persistence.database import store_errors
from kioku.infrastructure.persistence.datetime_utils import normalize_to_utc
from kioku.infrastructure.persistence.models import TurnModel


class SQLiteTurnRepository:
    """SQLite 版 TurnRepository 実装

    発言の追加・取得・削除を SQLite データベースに対して行う。
    各操作は1つのセッションと1回のコミットで完結する。
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

    async def append(self, turn: Turn) -> Turn:
        """発言を追加する

        Args:
            turn: 追加する発言

        Returns:
            ID が採番された発言

        Raises:
            StoreError: 制約違反や接続エラー
        """
        with store_errors("append_turn"):
            async with self._session_factory() as session:
                model = self._to_model(turn)
                session.add(model)
                await session.commit()
                await session.refresh(model)
                return self._to_entity(model)

    async def find_recent(self, channel_id: str, limit: int = 10) -> list[Turn]:
        """チャンネルの直近の発言を取得する

        ID の降順（新しい順）で返す。

        Args:
            channel_id: チャンネル ID
            limit: 取得する最大件数

        Returns:
            発言リスト（新しい順）
        """
        with store_errors("find_recent_turns"):
            async with self._session_factory() as session:
                statement = (
                    select(TurnModel)
                    .where(TurnModel.channel_id == channel_id)
                    .order_by(TurnModel.id.desc())  # type: ignore[union-attr]
                    .limit(limit)
                )
                result = await session.exec(statement)
                return [self._to_entity(m) for m in result.all()]

    async def delete_by_channel(self, channel_id: str) -> int:
        """チャンネルの発言をすべて削除する

        Args:
            channel_id: チャンネル ID

        Returns:
            削除した件数（0 件でもエラーにしない）
        """
        with store_errors("delete_turns"):
            async with self._session_factory() as session:
                stmt = delete(TurnModel).where(
                    TurnModel.channel_id == channel_id  # type: ignore[arg-type]
                )
                result = await session.execute(stmt)
                await session.commit()
                return result.rowcount  # type: ignore[union-attr]

    def _to_entity(self, model: TurnModel) -> Turn:
        """モデルをエンティティに変換する"""
        return Turn(
            id=model.id,
            guild_id=model.guild_id,
            channel_id=model.channel_id,
            author_id=model.author_id,
            role=Role(model.role),
            content=model.content,
            created_at=normalize_to_utc(model.created_at),
        )

    def _to_model(self, entity: Turn) -> TurnModel:
        """エンティティをモデルに変換する（ID はストアが採番する）"""
        return TurnModel(
            guild_id=entity.guild_id,
            channel_id=entity.channel_id,
            author_id=entity.author_id,
            role=entity.role.value,
            content=entity.content,
            created_at=entity.created_at,
        )
