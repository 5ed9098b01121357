"""Datetime helpers for the persistence layer."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """現在時刻（UTC, timezone-aware）"""
    return datetime.now(timezone.utc)


def normalize_to_utc(dt: datetime) -> datetime:
    """SQLite から読み出した日時を UTC の aware datetime にそろえる

    SQLite はタイムゾーン情報を保存しないため、naive な値は UTC とみなす。
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
