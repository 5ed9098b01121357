"""LLM response generator."""

import logging

from kioku.domain.entities import ReplyContext, describe_summary
from kioku.domain.exceptions import GenerationError
from kioku.infrastructure.llm.client import LLMClient
from kioku.infrastructure.llm.exceptions import LLMError
from kioku.infrastructure.llm.message_logger import LLMMessageLogger

logger = logging.getLogger(__name__)

REPLY_TEMPERATURE = 0.4


def build_messages(context: ReplyContext) -> list[dict[str, str]]:
    """Assemble the prompt for one reply.

    Order: persona instruction, long-term memory line, short-term
    history (oldest first), then the new user message.

    Args:
        context: Reply context.

    Returns:
        OpenAI-format message list.
    """
    messages = [
        {"role": "system", "content": context.system_prompt},
        {
            "role": "system",
            "content": (
                f"User long-term memory: {describe_summary(context.long_term_memory)}"
            ),
        },
    ]
    messages.extend(message.to_dict() for message in context.history)
    messages.append({"role": "user", "content": context.user_text})
    return messages


class LiteLLMResponseGenerator:
    """LiteLLM-based ResponseGenerator implementation.

    This class implements the ResponseGenerator protocol using LiteLLM
    to generate responses with short-term and long-term memory.
    """

    def __init__(
        self,
        client: LLMClient,
        *,
        temperature: float = REPLY_TEMPERATURE,
        debug_llm_messages: bool = False,
    ) -> None:
        """Initialize the generator.

        Args:
            client: LLMClient instance.
            temperature: Sampling temperature for replies.
            debug_llm_messages: If True, log LLM messages at INFO level.
        """
        self._client = client
        self._temperature = temperature
        self._message_logger = LLMMessageLogger(logger, debug_llm_messages)

    async def generate(self, context: ReplyContext) -> str:
        """Generate a response.

        Args:
            context: Persona, long-term memory, history and the new message.

        Returns:
            Generated response text, stripped.

        Raises:
            GenerationError: If the LLM call fails or returns no text.
        """
        messages = build_messages(context)
        self._message_logger.log_messages(messages)

        try:
            response = await self._client.complete(
                messages,
                temperature=self._temperature,
            )
        except LLMError as e:
            raise GenerationError(f"Reply generation failed: {e}") from e

        self._message_logger.log_response(response)

        text = response.strip()
        if not text:
            raise GenerationError("LLM returned an empty response")
        return text
