"""Inbound chat message entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InboundMessage:
    """チャットプラットフォームから届いたメッセージ（プラットフォーム非依存）

    Attributes:
        channel_id: チャンネル ID
        author_id: 送信者の ID
        text: メッセージ本文（加工前）
        guild_id: ワークスペース ID
        is_from_bot: ボットによる投稿かどうか
    """

    channel_id: str
    author_id: str
    text: str
    guild_id: str | None = None
    is_from_bot: bool = False
