"""Reply generation context."""

from dataclasses import dataclass, field

from kioku.domain.entities.turn import ChatMessage


@dataclass(frozen=True)
class ReplyRequest:
    """返答生成の要求

    Attributes:
        channel_id: 返答先チャンネルの ID
        user_id: 話しかけたユーザーの ID
        user_text: 宛先表記を取り除いたユーザーの発言
    """

    channel_id: str
    user_id: str
    user_text: str


@dataclass(frozen=True)
class ReplyContext:
    """返答生成に使うコンテキスト

    Attributes:
        system_prompt: ペルソナの指示
        long_term_memory: ユーザーの長期記憶（空文字列の場合あり）
        history: チャンネルの短期記憶（古い順）
        user_text: 返答すべきユーザーの発言
    """

    system_prompt: str
    user_text: str
    long_term_memory: str = ""
    history: list[ChatMessage] = field(default_factory=list)
