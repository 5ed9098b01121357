"""DB implementation of ShortTermContextProvider."""

from kioku.domain.entities import ChatMessage
from kioku.domain.repositories import TurnRepository

DEFAULT_SHORT_TERM_LIMIT = 10


class DBShortTermContextProvider:
    """DB 実装の短期記憶プロバイダ

    TurnRepository からチャンネルの直近の発言を取得し、
    LLM に渡せる古い順の {role, content} 列にする。
    """

    def __init__(
        self,
        turn_repository: TurnRepository,
        default_limit: int = DEFAULT_SHORT_TERM_LIMIT,
    ) -> None:
        """初期化

        Args:
            turn_repository: 発言リポジトリ
            default_limit: limit 省略時に取得する件数
        """
        self._turn_repository = turn_repository
        self._default_limit = default_limit

    async def get_context(
        self,
        channel_id: str,
        limit: int | None = None,
    ) -> list[ChatMessage]:
        """チャンネルの短期記憶を取得する

        Args:
            channel_id: チャンネル ID
            limit: 取得する最大件数（None の場合は default_limit）

        Returns:
            メッセージリスト（古い順）
        """
        if limit is None:
            limit = self._default_limit
        if limit <= 0:
            return []

        # TurnRepository は新しい順で返すので、反転して古い順にする
        turns = await self._turn_repository.find_recent(channel_id, limit)
        return [
            ChatMessage(role=turn.role, content=turn.content)
            for turn in reversed(turns)
        ]
