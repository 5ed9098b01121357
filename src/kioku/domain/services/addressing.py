"""Detection of messages addressed to the bot."""

import re

DEFAULT_PREFIX = "!"


def _mention_pattern(bot_user_id: str) -> re.Pattern[str]:
    """ボットへのメンション（<@U123> / <@U123|name>）にマッチするパターン"""
    return re.compile(rf"<@{re.escape(bot_user_id)}(?:\|[^>]*)?>")


def is_addressed(raw_text: str, bot_user_id: str, prefix: str = DEFAULT_PREFIX) -> bool:
    """メッセージがボット宛てかどうかを判定する

    Args:
        raw_text: 加工前のメッセージ本文
        bot_user_id: ボットのユーザー ID
        prefix: ボット宛てとみなす先頭の記号

    Returns:
        ボットへのメンションを含むか、prefix で始まる場合 True
    """
    if raw_text.startswith(prefix):
        return True
    return _mention_pattern(bot_user_id).search(raw_text) is not None


def extract_addressed_text(
    raw_text: str,
    bot_user_id: str,
    prefix: str = DEFAULT_PREFIX,
) -> str | None:
    """ボット宛てのメッセージから宛先表記を取り除いた本文を取り出す

    先頭の prefix（と続く空白）とボットへのメンションをすべて取り除き、
    前後の空白を削る。

    Args:
        raw_text: 加工前のメッセージ本文
        bot_user_id: ボットのユーザー ID
        prefix: ボット宛てとみなす先頭の記号

    Returns:
        宛先表記を除いた本文。ボット宛てでない場合は None。
        宛先表記しかない場合は空文字列。
    """
    if not is_addressed(raw_text, bot_user_id, prefix):
        return None

    text = raw_text
    if text.startswith(prefix):
        text = text[len(prefix) :].lstrip()
    text = _mention_pattern(bot_user_id).sub("", text)
    return text.strip()
