"""User memory repository protocol."""

from typing import Protocol

from kioku.domain.entities import UserMemory


class UserMemoryRepository(Protocol):
    """長期記憶リポジトリの抽象インターフェース"""

    async def get_summary(self, user_id: str) -> str:
        """ユーザーの要約を取得する

        Args:
            user_id: ユーザー ID

        Returns:
            要約（存在しない場合は空文字列）
        """
        ...

    async def find_by_user_id(self, user_id: str) -> UserMemory | None:
        """ユーザーの長期記憶を取得する

        Args:
            user_id: ユーザー ID

        Returns:
            長期記憶、または None
        """
        ...

    async def upsert(self, user_id: str, summary: str) -> UserMemory:
        """要約を保存する（upsert）

        既存の要約は丸ごと上書きされ、更新日時も更新される。

        Args:
            user_id: ユーザー ID
            summary: 保存する要約

        Returns:
            保存された長期記憶
        """
        ...

    async def delete(self, user_id: str) -> bool:
        """ユーザーの長期記憶を削除する

        Args:
            user_id: ユーザー ID

        Returns:
            削除した場合 True、存在しなかった場合 False
        """
        ...
