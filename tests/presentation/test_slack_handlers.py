"""Tests for Slack event and command handlers."""

from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from kioku.application.use_cases import PipelineStage
from kioku.domain.entities import InboundMessage
from kioku.domain.exceptions import StoreError
from kioku.presentation.slack_handlers import register_handlers

APOLOGY = "Oops, something went wrong. Try again in a moment."


@pytest.fixture
def mock_handle_message_use_case() -> Mock:
    """Create a mock HandleMessageUseCase."""
    mock = Mock()
    mock.execute = AsyncMock(return_value=PipelineStage.DONE)
    return mock


@pytest.fixture
def mock_memory_commands_use_case() -> Mock:
    """Create a mock MemoryCommandsUseCase."""
    mock = Mock()
    mock.show_memory = AsyncMock(return_value="Likes Rust.")
    mock.forget_memory = AsyncMock(return_value="Your long-term memory was erased.")
    mock.reset_channel = AsyncMock(
        return_value="This channel's short-term memory was cleared."
    )
    return mock


@pytest.fixture
def mock_event_adapter() -> Mock:
    """Create a mock SlackEventAdapter."""
    mock = Mock()
    mock.to_inbound_message.return_value = InboundMessage(
        channel_id="C001", author_id="U001", text="!hello"
    )
    return mock


@pytest.fixture
def registered_handlers(
    mock_handle_message_use_case: Mock,
    mock_memory_commands_use_case: Mock,
    mock_event_adapter: Mock,
) -> dict[str, Any]:
    """Register handlers and return captured handler dict."""
    handlers: dict[str, Any] = {}
    mock_app = Mock()

    def capture(name: str):
        def decorator(func):
            handlers[name] = func
            return func

        return decorator

    mock_app.event = capture
    mock_app.command = capture

    register_handlers(
        mock_app,
        mock_handle_message_use_case,
        mock_memory_commands_use_case,
        mock_event_adapter,
        APOLOGY,
    )
    return handlers


@pytest.fixture
def ack() -> AsyncMock:
    """Create a mock ack function."""
    return AsyncMock()


@pytest.fixture
def respond() -> AsyncMock:
    """Create a mock respond function."""
    return AsyncMock()


COMMAND = {"user_id": "U001", "channel_id": "C001", "text": ""}


class TestRegistration:
    """Handler registration tests."""

    def test_all_handlers_registered(self, registered_handlers: dict) -> None:
        """Test that events and commands are registered."""
        assert set(registered_handlers) == {
            "app_mention",
            "message",
            "/memory",
            "/forget",
            "/reset",
        }


class TestMessageHandler:
    """message event tests."""

    async def test_executes_use_case(
        self,
        registered_handlers: dict,
        mock_event_adapter: Mock,
        mock_handle_message_use_case: Mock,
    ) -> None:
        """Test that converted messages are processed."""
        event = {"channel": "C001", "user": "U001", "text": "!hello"}

        await registered_handlers["message"](event=event)

        mock_event_adapter.to_inbound_message.assert_called_once_with(event)
        mock_handle_message_use_case.execute.assert_awaited_once()

    async def test_skips_non_messages(
        self,
        registered_handlers: dict,
        mock_event_adapter: Mock,
        mock_handle_message_use_case: Mock,
    ) -> None:
        """Test that dropped events are not processed."""
        mock_event_adapter.to_inbound_message.return_value = None

        await registered_handlers["message"](event={"subtype": "message_changed"})

        mock_handle_message_use_case.execute.assert_not_awaited()

    async def test_errors_are_logged_not_raised(
        self,
        registered_handlers: dict,
        mock_handle_message_use_case: Mock,
    ) -> None:
        """Test that unexpected failures do not escape the handler."""
        mock_handle_message_use_case.execute.side_effect = RuntimeError("boom")

        await registered_handlers["message"](event={"channel": "C001"})


class TestCommandHandlers:
    """Slash command tests."""

    async def test_memory_command(
        self,
        registered_handlers: dict,
        mock_memory_commands_use_case: Mock,
        ack: AsyncMock,
        respond: AsyncMock,
    ) -> None:
        """Test /memory."""
        await registered_handlers["/memory"](ack=ack, command=COMMAND, respond=respond)

        ack.assert_awaited_once()
        mock_memory_commands_use_case.show_memory.assert_awaited_once_with("U001")
        respond.assert_awaited_once_with(text="Likes Rust.", response_type="ephemeral")

    async def test_forget_command(
        self,
        registered_handlers: dict,
        mock_memory_commands_use_case: Mock,
        ack: AsyncMock,
        respond: AsyncMock,
    ) -> None:
        """Test /forget."""
        await registered_handlers["/forget"](ack=ack, command=COMMAND, respond=respond)

        mock_memory_commands_use_case.forget_memory.assert_awaited_once_with("U001")
        respond.assert_awaited_once_with(
            text="Your long-term memory was erased.", response_type="ephemeral"
        )

    async def test_reset_command(
        self,
        registered_handlers: dict,
        mock_memory_commands_use_case: Mock,
        ack: AsyncMock,
        respond: AsyncMock,
    ) -> None:
        """Test /reset."""
        await registered_handlers["/reset"](ack=ack, command=COMMAND, respond=respond)

        mock_memory_commands_use_case.reset_channel.assert_awaited_once_with("C001")
        assert respond.call_args.kwargs["response_type"] == "ephemeral"

    async def test_command_failure_responds_with_apology(
        self,
        registered_handlers: dict,
        mock_memory_commands_use_case: Mock,
        ack: AsyncMock,
        respond: AsyncMock,
    ) -> None:
        """Test that a store failure still answers the user."""
        mock_memory_commands_use_case.reset_channel.side_effect = StoreError("locked")

        await registered_handlers["/reset"](ack=ack, command=COMMAND, respond=respond)

        ack.assert_awaited_once()
        respond.assert_awaited_once_with(text=APOLOGY, response_type="ephemeral")
