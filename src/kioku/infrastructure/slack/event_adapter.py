"""Slack event adapter."""

from typing import Any

from kioku.domain.entities import InboundMessage

# Message subtypes that carry a new user-visible message
_NEW_MESSAGE_SUBTYPES = frozenset(
    {None, "thread_broadcast", "file_share", "bot_message"}
)


class SlackEventAdapter:
    """Convert Slack message events to InboundMessage entities.

    Edits, deletions, joins and other housekeeping subtypes are not
    new messages and are dropped.
    """

    def __init__(self, bot_user_id: str) -> None:
        """Initialize the adapter.

        Args:
            bot_user_id: The bot's own user ID.
        """
        self._bot_user_id = bot_user_id

    def to_inbound_message(self, event: dict[str, Any]) -> InboundMessage | None:
        """Convert a Slack message event.

        Args:
            event: Slack message event payload.

        Returns:
            InboundMessage, or None if the event is not a new message.
        """
        if event.get("subtype") not in _NEW_MESSAGE_SUBTYPES:
            return None

        channel_id = event.get("channel")
        author_id = event.get("user") or event.get("bot_id")
        if not channel_id or not author_id:
            return None

        is_from_bot = (
            event.get("subtype") == "bot_message"
            or "bot_id" in event
            or author_id == self._bot_user_id
        )

        return InboundMessage(
            guild_id=event.get("team"),
            channel_id=channel_id,
            author_id=author_id,
            text=event.get("text", ""),
            is_from_bot=is_from_bot,
        )
