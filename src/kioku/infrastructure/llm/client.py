"""LLM client wrapper."""

import asyncio
import logging
from typing import Any

import litellm
from litellm.exceptions import AuthenticationError, RateLimitError

from kioku.config import LLMConfig
from kioku.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMTimeoutError,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """LiteLLM wrapper client.

    This class provides a simplified interface to LiteLLM,
    applying configuration and handling errors. Each call is bounded
    by the configured timeout so a stalled provider never suspends
    a conversation indefinitely.
    """

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the client.

        Args:
            config: LLM configuration (model, temperature, max_tokens, etc.).
        """
        self._config = config

    @property
    def model(self) -> str:
        """Configured model name."""
        return self._config.model

    async def complete(
        self,
        messages: list[dict[str, str]],
        **kwargs: Any,
    ) -> str:
        """Execute chat completion.

        Args:
            messages: OpenAI-format message list.
                [{"role": "system", "content": "..."}, ...]
            **kwargs: Additional parameters (override config).

        Returns:
            Generated text. Empty string if the provider returned no content.

        Raises:
            LLMAuthenticationError: Invalid API key.
            LLMRateLimitError: Rate limit exceeded.
            LLMTimeoutError: No response within timeout_seconds.
            LLMError: Other API errors, or a response without choices.
        """
        params = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "num_retries": self._config.num_retries,
            "messages": messages,
            **kwargs,
        }

        logger.debug("LLM request: model=%s", params["model"])

        try:
            response = await asyncio.wait_for(
                litellm.acompletion(**params),
                timeout=self._config.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.warning(
                "LLM request timed out after %ss", self._config.timeout_seconds
            )
            raise LLMTimeoutError(
                f"LLM request timed out after {self._config.timeout_seconds}s"
            ) from e
        except AuthenticationError as e:
            logger.error("LLM authentication error: %s", e)
            raise LLMAuthenticationError(str(e)) from e
        except RateLimitError as e:
            logger.warning("LLM rate limit exceeded: %s", e)
            raise LLMRateLimitError(str(e)) from e
        except Exception as e:
            logger.error("LLM error: %s", e)
            raise LLMError(str(e)) from e

        if not response.choices:
            raise LLMError("LLM response contained no choices")

        content = response.choices[0].message.content
        logger.debug("LLM response received")
        return content or ""
