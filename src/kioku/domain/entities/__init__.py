"""Domain entities."""

from kioku.domain.entities.context import ReplyContext, ReplyRequest
from kioku.domain.entities.inbound_message import InboundMessage
from kioku.domain.entities.turn import ChatMessage, Role, Turn
from kioku.domain.entities.user_memory import (
    NO_MEMORY_MARKER,
    UserMemory,
    describe_summary,
)

__all__ = [
    "NO_MEMORY_MARKER",
    "ChatMessage",
    "InboundMessage",
    "ReplyContext",
    "ReplyRequest",
    "Role",
    "Turn",
    "UserMemory",
    "describe_summary",
]
