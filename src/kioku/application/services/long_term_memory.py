"""Long-term (per-user) memory management."""

import logging

from kioku.application.services.keyed_lock import KeyedLock
from kioku.domain.exceptions import SummarizationError
from kioku.domain.repositories import UserMemoryRepository
from kioku.domain.services import MemorySummarizer

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_MAX_CHARS = 500


def truncate_summary(summary: str, max_chars: int) -> str:
    """要約を max_chars 以内に切り詰める

    可能であれば単語の途中では切らない。

    Args:
        summary: 要約
        max_chars: 最大文字数

    Returns:
        切り詰めた要約
    """
    if len(summary) <= max_chars:
        return summary
    cut = summary[:max_chars]
    head, sep, _ = cut.rpartition(" ")
    if sep and head.strip():
        cut = head
    return cut.rstrip()


class LongTermMemoryManager:
    """ユーザーの長期記憶（1文の要約）の読み出し・更新・消去を担う

    要約は追記ではなく常に丸ごと置き換える。
    同じユーザーの更新はユーザー ID 単位のロックで直列化し、
    古い要約をもとにした更新で新しい要約が失われないようにする。
    """

    def __init__(
        self,
        repository: UserMemoryRepository,
        summarizer: MemorySummarizer,
        *,
        max_chars: int = DEFAULT_SUMMARY_MAX_CHARS,
        locks: KeyedLock | None = None,
    ) -> None:
        """初期化

        Args:
            repository: 長期記憶リポジトリ
            summarizer: 要約サービス
            max_chars: 保存する要約の最大文字数
            locks: ユーザー単位のロックテーブル
        """
        self._repository = repository
        self._summarizer = summarizer
        self._max_chars = max_chars
        self._locks = locks if locks is not None else KeyedLock()

    async def read(self, user_id: str) -> str:
        """ユーザーの要約を取得する（存在しない場合は空文字列）"""
        return await self._repository.get_summary(user_id)

    async def erase(self, user_id: str) -> None:
        """ユーザーの要約を消去する（存在しなくても成功する）

        update() と同じユーザー単位のロックを取得してから削除するため、
        実行中の update() がある場合はその完了後に削除される。
        """
        async with self._locks.acquire(user_id):
            deleted = await self._repository.delete(user_id)
        logger.info("Erased long-term memory: user=%s, existed=%s", user_id, deleted)

    async def update(self, user_id: str, new_message_text: str) -> str | None:
        """新しい発言をもとに要約を更新する

        1. 現在の要約を読み出す
        2. 要約サービスに現在の要約と新しい発言を渡す
        3. 結果で要約を上書きし、更新日時を更新する

        要約サービスが失敗した場合は警告を記録し、要約は変更しない。
        空の結果が返った場合は現在の要約を維持する（更新日時は更新する）。

        Args:
            user_id: ユーザー ID
            new_message_text: ユーザーの発言（加工前の本文）

        Returns:
            保存した要約。要約サービスが失敗した場合は None。

        Raises:
            StoreError: 要約の読み書きに失敗した場合
        """
        async with self._locks.acquire(user_id):
            current = await self._repository.get_summary(user_id)

            try:
                updated = await self._summarizer.summarize(current, new_message_text)
            except SummarizationError as e:
                logger.warning(
                    "Long-term memory update skipped: user=%s, error=%s", user_id, e
                )
                return None

            updated = updated.strip()
            if not updated:
                logger.warning(
                    "Summarizer returned empty text, keeping current summary: user=%s",
                    user_id,
                )
                updated = current
            updated = truncate_summary(updated, self._max_chars)

            memory = await self._repository.upsert(user_id, updated)
            logger.debug(
                "Updated long-term memory: user=%s, changed=%s",
                user_id,
                memory.summary != current,
            )
            return memory.summary
