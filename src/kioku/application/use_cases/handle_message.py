"""Handle inbound chat message use case."""

import logging
from enum import Enum

from kioku.application.services import (
    BackgroundMemoryUpdater,
    KeyedLock,
    ReplyGenerator,
)
from kioku.config import ChatConfig
from kioku.domain.entities import InboundMessage, ReplyRequest, Role, Turn
from kioku.domain.repositories import TurnRepository
from kioku.domain.services import MessagingService, extract_addressed_text

logger = logging.getLogger(__name__)


class PipelineStage(Enum):
    """メッセージ処理の段階"""

    RECEIVED = "received"
    PERSIST_USER_TURN = "persist_user_turn"
    GENERATE_REPLY = "generate_reply"
    PERSIST_ASSISTANT_TURN = "persist_assistant_turn"
    UPDATE_MEMORY = "update_memory"
    DONE = "done"
    FAILED = "failed"
    IGNORED = "ignored"


class HandleMessageUseCase:
    """Use case for processing every inbound chat message.

    Every non-bot message is stored as a user turn first, so the
    channel's short-term memory also covers messages that were not
    addressed to the bot. Addressed messages are then answered and the
    author's long-term memory is updated in the background from the
    original message text.

    Messages in the same channel are processed one at a time.
    """

    def __init__(
        self,
        turn_repository: TurnRepository,
        reply_generator: ReplyGenerator,
        messaging_service: MessagingService,
        memory_updater: BackgroundMemoryUpdater,
        chat_config: ChatConfig,
        bot_user_id: str,
        channel_locks: KeyedLock | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            turn_repository: Repository for the channel transcript.
            reply_generator: Service for generating replies.
            messaging_service: Service for sending messages.
            memory_updater: Background long-term memory updater.
            chat_config: Prefix marker and apology text.
            bot_user_id: The bot's user ID.
            channel_locks: Per-channel lock table.
        """
        self._turn_repository = turn_repository
        self._reply_generator = reply_generator
        self._messaging_service = messaging_service
        self._memory_updater = memory_updater
        self._chat_config = chat_config
        self._bot_user_id = bot_user_id
        self._channel_locks = channel_locks if channel_locks is not None else KeyedLock()

    async def execute(self, message: InboundMessage) -> PipelineStage:
        """Execute the use case.

        Processing flow:
        1. Ignore messages from bots and messages without text
        2. Save the received message as a user turn
        3. Stop unless the message is addressed to the bot
        4. Generate a reply from short-term and long-term memory
        5. Send the reply and save it as an assistant turn
        6. Schedule the long-term memory update with the raw message text

        Args:
            message: The received message.

        Returns:
            The terminal stage (DONE, FAILED or IGNORED).
        """
        if message.is_from_bot or message.author_id == self._bot_user_id:
            return PipelineStage.IGNORED
        if not message.text.strip():
            logger.debug("Ignoring message without text in %s", message.channel_id)
            return PipelineStage.IGNORED

        async with self._channel_locks.acquire(message.channel_id):
            return await self._process(message)

    async def _process(self, message: InboundMessage) -> PipelineStage:
        stage = PipelineStage.RECEIVED
        user_text = extract_addressed_text(
            message.text, self._bot_user_id, self._chat_config.prefix
        )

        try:
            stage = PipelineStage.PERSIST_USER_TURN
            await self._turn_repository.append(
                Turn(
                    guild_id=message.guild_id,
                    channel_id=message.channel_id,
                    author_id=message.author_id,
                    role=Role.USER,
                    content=message.text,
                )
            )

            if user_text is None:
                return PipelineStage.DONE
            if not user_text:
                logger.info(
                    "Addressed message without content in %s; not replying",
                    message.channel_id,
                )
                return PipelineStage.DONE

            logger.info(
                "Replying to %s in %s", message.author_id, message.channel_id
            )

            stage = PipelineStage.GENERATE_REPLY
            reply = await self._reply_generator.generate(
                ReplyRequest(
                    channel_id=message.channel_id,
                    user_id=message.author_id,
                    user_text=user_text,
                )
            )
            await self._messaging_service.send_message(
                channel_id=message.channel_id, text=reply
            )

            stage = PipelineStage.PERSIST_ASSISTANT_TURN
            await self._turn_repository.append(
                Turn(
                    guild_id=message.guild_id,
                    channel_id=message.channel_id,
                    author_id=self._bot_user_id,
                    role=Role.ASSISTANT,
                    content=reply,
                )
            )
        except Exception:
            logger.exception(
                "Message handling failed at %s in %s",
                stage.value,
                message.channel_id,
            )
            if user_text:
                await self._send_apology(message.channel_id)
            return PipelineStage.FAILED

        # UPDATE_MEMORY: the raw text is the new information, not the reply
        self._memory_updater.schedule(message.author_id, message.text)
        return PipelineStage.DONE

    async def _send_apology(self, channel_id: str) -> None:
        """Send the fixed apology; failures are logged only."""
        try:
            await self._messaging_service.send_message(
                channel_id=channel_id, text=self._chat_config.apology_message
            )
        except Exception:
            logger.exception("Failed to send apology to %s", channel_id)
