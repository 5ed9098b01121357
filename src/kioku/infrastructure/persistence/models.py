"""SQLModel table definitions."""

from datetime import datetime

from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

from kioku.infrastructure.persistence.datetime_utils import utc_now


class TurnModel(SQLModel, table=True):
    """会話履歴テーブル"""

    __tablename__ = "turns"

    id: int | None = Field(default=None, primary_key=True)
    guild_id: str | None = None
    channel_id: str = Field(index=True)
    author_id: str
    role: str
    content: str
    created_at: datetime = Field(default_factory=utc_now)

    __table_args__ = (
        CheckConstraint("role IN ('user', 'assistant')", name="ck_turn_role"),
    )


class UserMemoryModel(SQLModel, table=True):
    """長期記憶テーブル（ユーザーにつき1行）"""

    __tablename__ = "user_memories"

    user_id: str = Field(primary_key=True)
    summary: str = ""
    updated_at: datetime = Field(default_factory=utc_now)
