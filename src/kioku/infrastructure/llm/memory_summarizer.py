"""LLM-based user memory summarizer."""

import logging

from kioku.domain.entities import describe_summary
from kioku.domain.exceptions import SummarizationError
from kioku.infrastructure.llm.client import LLMClient
from kioku.infrastructure.llm.exceptions import LLMError
from kioku.infrastructure.llm.message_logger import LLMMessageLogger
from kioku.infrastructure.llm.templates import create_jinja_env

logger = logging.getLogger(__name__)

SUMMARY_TEMPERATURE = 0.2
SUMMARY_MAX_WORDS = 40


class LLMMemorySummarizer:
    """LLM-based long-term memory summarization service.

    Folds one new user message into the user's existing one-sentence
    summary. The model is told to return the existing summary verbatim
    when the message carries nothing durable about the user.
    """

    def __init__(
        self,
        client: LLMClient,
        *,
        max_words: int = SUMMARY_MAX_WORDS,
        temperature: float = SUMMARY_TEMPERATURE,
        debug_llm_messages: bool = False,
    ) -> None:
        """Initialize the summarizer.

        Args:
            client: LLM client for text generation.
            max_words: Word limit given to the model.
            temperature: Sampling temperature for summary updates.
            debug_llm_messages: If True, log LLM messages at INFO level.
        """
        self._client = client
        self._max_words = max_words
        self._temperature = temperature
        self._message_logger = LLMMessageLogger(logger, debug_llm_messages)
        jinja_env = create_jinja_env()
        self._system_template = jinja_env.get_template("summary_system.j2")
        self._prompt_template = jinja_env.get_template("summary_prompt.j2")

    async def summarize(self, current_summary: str, new_message: str) -> str:
        """Produce the updated summary.

        Args:
            current_summary: Stored summary (may be empty).
            new_message: Raw text of the user's latest message.

        Returns:
            Updated summary with surrounding whitespace stripped.

        Raises:
            SummarizationError: If the model call fails.
        """
        messages = self.build_messages(current_summary, new_message)
        self._message_logger.log_messages(messages)

        try:
            response = await self._client.complete(
                messages,
                temperature=self._temperature,
            )
        except LLMError as e:
            raise SummarizationError(f"Summary update failed: {e}") from e

        self._message_logger.log_response(response)
        return response.strip()

    def build_messages(
        self, current_summary: str, new_message: str
    ) -> list[dict[str, str]]:
        """Build the system and user messages for a summary update."""
        system_prompt = self._system_template.render(max_words=self._max_words)
        prompt = self._prompt_template.render(
            current_summary=describe_summary(current_summary),
            new_message=new_message,
        )
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]
