"""Domain service protocols."""

from typing import Protocol

from kioku.domain.entities import ChatMessage, ReplyContext


class ShortTermContextProvider(Protocol):
    """Short-term conversation window retrieval.

    Returns the most recent turns of a channel in causal order.
    """

    async def get_context(
        self,
        channel_id: str,
        limit: int | None = None,
    ) -> list[ChatMessage]:
        """Fetch the conversation window for a channel.

        Args:
            channel_id: Channel ID.
            limit: Maximum number of turns. Implementation default if None.

        Returns:
            Messages in chronological order (oldest first).
        """
        ...


class MessagingService(Protocol):
    """Messaging abstraction (platform-independent).

    This protocol defines the interface for sending messages
    to any messaging platform (Slack, Discord, etc.).
    """

    async def send_message(self, channel_id: str, text: str) -> None:
        """Send a message to a channel.

        Args:
            channel_id: Target channel ID.
            text: Message content.
        """
        ...


class ResponseGenerator(Protocol):
    """Response generation abstraction.

    This protocol defines the interface for generating
    responses using LLM or other mechanisms.
    """

    async def generate(self, context: ReplyContext) -> str:
        """Generate a response.

        Args:
            context: Persona, long-term memory, history and the new message.

        Returns:
            Generated response text (never empty).

        Raises:
            GenerationError: If no usable response could be generated.
        """
        ...


class MemorySummarizer(Protocol):
    """Long-term memory summarization.

    Folds a new user message into the user's one-sentence summary.
    """

    async def summarize(self, current_summary: str, new_message: str) -> str:
        """Produce the updated summary.

        Args:
            current_summary: Stored summary (may be empty).
            new_message: Raw text of the user's latest message.

        Returns:
            Updated summary. The current summary verbatim when the
            message carries nothing new.

        Raises:
            SummarizationError: If the underlying model call fails.
        """
        ...
