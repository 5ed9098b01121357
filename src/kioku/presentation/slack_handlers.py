"""Slack event and command handlers."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from slack_bolt.async_app import AsyncApp

from kioku.application.use_cases import HandleMessageUseCase, MemoryCommandsUseCase
from kioku.infrastructure.slack import SlackEventAdapter

logger = logging.getLogger(__name__)


async def _run_command(
    name: str,
    action: Callable[[], Awaitable[str]],
    respond: Callable[..., Awaitable[Any]],
    apology_message: str,
) -> None:
    """Run a memory command and answer the invoking user only."""
    try:
        text = await action()
    except Exception:
        logger.exception("Error handling /%s command", name)
        text = apology_message
    await respond(text=text, response_type="ephemeral")


def register_handlers(
    app: AsyncApp,
    handle_message_use_case: HandleMessageUseCase,
    memory_commands_use_case: MemoryCommandsUseCase,
    event_adapter: SlackEventAdapter,
    apology_message: str,
) -> None:
    """Register Slack event and command handlers.

    Args:
        app: AsyncApp instance.
        handle_message_use_case: Use case for inbound messages.
        memory_commands_use_case: Use case for memory commands.
        event_adapter: Adapter for converting events to entities.
        apology_message: Reply used when a command fails.
    """

    @app.event("app_mention")
    async def handle_app_mention(event: dict) -> None:
        """Handle app_mention events (no-op).

        The same message also arrives as a message event, which does
        the actual processing.
        """
        logger.debug("Received app_mention event: %s", event.get("ts"))

    @app.event("message")
    async def handle_message(event: dict) -> None:
        """Handle message events.

        Args:
            event: Slack event payload.
        """
        logger.debug(
            "Processing message event: ts=%s, subtype=%s, channel=%s",
            event.get("ts"),
            event.get("subtype"),
            event.get("channel"),
        )

        message = event_adapter.to_inbound_message(event)
        if message is None:
            return

        try:
            stage = await handle_message_use_case.execute(message)
            logger.debug("Message %s finished: %s", event.get("ts"), stage.value)
        except Exception:
            logger.exception("Error handling message event")

    @app.command("/memory")
    async def handle_memory_command(ack, command: dict, respond) -> None:
        """Show the invoking user's long-term memory."""
        await ack()
        await _run_command(
            "memory",
            lambda: memory_commands_use_case.show_memory(command["user_id"]),
            respond,
            apology_message,
        )

    @app.command("/forget")
    async def handle_forget_command(ack, command: dict, respond) -> None:
        """Erase the invoking user's long-term memory."""
        await ack()
        await _run_command(
            "forget",
            lambda: memory_commands_use_case.forget_memory(command["user_id"]),
            respond,
            apology_message,
        )

    @app.command("/reset")
    async def handle_reset_command(ack, command: dict, respond) -> None:
        """Clear the channel's short-term memory."""
        await ack()
        await _run_command(
            "reset",
            lambda: memory_commands_use_case.reset_channel(command["channel_id"]),
            respond,
            apology_message,
        )
