"""Turn repository protocol."""

from typing import Protocol

from kioku.domain.entities import Turn


class TurnRepository(Protocol):
    """会話履歴（短期記憶）リポジトリの抽象インターフェース"""

    async def append(self, turn: Turn) -> Turn:
        """発言を追加する

        Args:
            turn: 追加する発言

        Returns:
            ID が採番された発言

        Raises:
            StoreError: 制約違反や接続エラー
        """
        ...

    async def find_recent(self, channel_id: str, limit: int = 10) -> list[Turn]:
        """チャンネルの直近の発言を取得する

        Args:
            channel_id: チャンネル ID
            limit: 取得する最大件数

        Returns:
            発言リスト（新しい順）
        """
        ...

    async def delete_by_channel(self, channel_id: str) -> int:
        """チャンネルの発言をすべて削除する

        該当する発言がなくてもエラーにならない。

        Args:
            channel_id: チャンネル ID

        Returns:
            削除した件数
        """
        ...
