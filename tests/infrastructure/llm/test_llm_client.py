"""Tests for LLMClient."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from litellm.exceptions import AuthenticationError, RateLimitError

from kioku.config import LLMConfig
from kioku.infrastructure.llm import (
    LLMAuthenticationError,
    LLMClient,
    LLMError,
    LLMRateLimitError,
    LLMTimeoutError,
)

MESSAGES = [{"role": "user", "content": "Hello"}]


class TestLLMClient:
    """LLMClient tests."""

    @pytest.fixture
    def config(self) -> LLMConfig:
        """Create LLM config."""
        return LLMConfig(
            model="gpt-4o-mini",
            temperature=0.7,
            max_tokens=1000,
            timeout_seconds=5.0,
            num_retries=3,
        )

    @pytest.fixture
    def client(self, config: LLMConfig) -> LLMClient:
        """Create LLMClient instance."""
        return LLMClient(config=config)

    @pytest.fixture
    def mock_response(self) -> MagicMock:
        """Create mock LiteLLM response."""
        response = MagicMock()
        response.choices = [MagicMock()]
        response.choices[0].message.content = "Hello! How can I help you?"
        return response

    async def test_complete_success(
        self, client: LLMClient, mock_response: MagicMock
    ) -> None:
        """Test successful completion."""
        with patch(
            "litellm.acompletion", new_callable=AsyncMock, return_value=mock_response
        ) as mock_completion:
            result = await client.complete(MESSAGES)

        assert result == "Hello! How can I help you?"
        mock_completion.assert_awaited_once()
        assert client.model == "gpt-4o-mini"

    async def test_complete_applies_config(
        self, client: LLMClient, mock_response: MagicMock
    ) -> None:
        """Test that config parameters are applied."""
        with patch(
            "litellm.acompletion", new_callable=AsyncMock, return_value=mock_response
        ) as mock_completion:
            await client.complete(MESSAGES)

        call_kwargs = mock_completion.call_args.kwargs
        assert call_kwargs["model"] == "gpt-4o-mini"
        assert call_kwargs["temperature"] == 0.7
        assert call_kwargs["max_tokens"] == 1000
        assert call_kwargs["num_retries"] == 3
        assert call_kwargs["messages"] == MESSAGES

    async def test_complete_kwargs_override(
        self, client: LLMClient, mock_response: MagicMock
    ) -> None:
        """Test that kwargs can override config."""
        with patch(
            "litellm.acompletion", new_callable=AsyncMock, return_value=mock_response
        ) as mock_completion:
            await client.complete(MESSAGES, temperature=0.2)

        assert mock_completion.call_args.kwargs["temperature"] == 0.2

    async def test_none_content_becomes_empty_string(
        self, client: LLMClient, mock_response: MagicMock
    ) -> None:
        """Test a response without content."""
        mock_response.choices[0].message.content = None
        with patch(
            "litellm.acompletion", new_callable=AsyncMock, return_value=mock_response
        ):
            assert await client.complete(MESSAGES) == ""

    async def test_no_choices(self, client: LLMClient) -> None:
        """Test a response without choices."""
        response = MagicMock()
        response.choices = []
        with patch(
            "litellm.acompletion", new_callable=AsyncMock, return_value=response
        ):
            with pytest.raises(LLMError, match="no choices"):
                await client.complete(MESSAGES)

    async def test_complete_timeout(self) -> None:
        """Test that a stalled provider raises LLMTimeoutError."""
        client = LLMClient(LLMConfig(model="gpt-4o-mini", timeout_seconds=0.01))

        async def stall(**kwargs):
            await asyncio.sleep(1)

        with patch("litellm.acompletion", side_effect=stall):
            with pytest.raises(LLMTimeoutError):
                await client.complete(MESSAGES)

    async def test_complete_authentication_error(self, client: LLMClient) -> None:
        """Test that authentication errors are converted."""
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_completion:
            mock_completion.side_effect = AuthenticationError(
                message="Invalid API key",
                llm_provider="openai",
                model="gpt-4o-mini",
            )

            with pytest.raises(LLMAuthenticationError):
                await client.complete(MESSAGES)

    async def test_complete_rate_limit_error(self, client: LLMClient) -> None:
        """Test that rate limit errors are converted."""
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_completion:
            mock_completion.side_effect = RateLimitError(
                message="Rate limit exceeded",
                llm_provider="openai",
                model="gpt-4o-mini",
            )

            with pytest.raises(LLMRateLimitError):
                await client.complete(MESSAGES)

    async def test_complete_generic_error(self, client: LLMClient) -> None:
        """Test that other errors are converted to LLMError."""
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_completion:
            mock_completion.side_effect = Exception("Unknown error")

            with pytest.raises(LLMError):
                await client.complete(MESSAGES)
