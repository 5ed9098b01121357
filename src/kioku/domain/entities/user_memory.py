"""UserMemory entity."""

from dataclasses import dataclass
from datetime import datetime

NO_MEMORY_MARKER = "(none)"


@dataclass(frozen=True)
class UserMemory:
    """ユーザーごとの長期記憶

    ユーザーにつき1件だけ存在し、更新時は全体が上書きされる。

    Attributes:
        user_id: ユーザー ID（一意）
        summary: ユーザーに関する1文の要約（空文字列の場合あり）
        updated_at: 最終更新日時
    """

    user_id: str
    summary: str
    updated_at: datetime


def describe_summary(summary: str) -> str:
    """要約をプロンプト用の文字列にする

    空の要約はプロンプト上で曖昧にならないよう "(none)" で表す。
    """
    return summary if summary else NO_MEMORY_MARKER
