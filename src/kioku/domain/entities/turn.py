"""Turn entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Role(Enum):
    """発言者の役割"""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Turn:
    """会話の1発言

    Turn は作成後に更新されない。チャンネルのリセットでのみ削除される。

    Attributes:
        channel_id: 発言されたチャンネルの ID
        author_id: 発言者の ID（アシスタントの発言ではボットの ID）
        role: 発言者の役割
        content: 発言内容（空文字列は不可）
        guild_id: ワークスペース（Slack の team）の ID
        id: ストアが採番する ID（未保存の場合は None）
        created_at: 作成日時
    """

    channel_id: str
    author_id: str
    role: Role
    content: str
    guild_id: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション"""
        if not isinstance(self.role, Role):
            raise ValueError(f"Invalid role: {self.role!r}")
        if not self.content or not self.content.strip():
            raise ValueError("Turn content must not be empty")


@dataclass(frozen=True)
class ChatMessage:
    """LLM に渡す1メッセージ分の {role, content}"""

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        """OpenAI 形式の dict に変換する"""
        return {"role": self.role.value, "content": self.content}
