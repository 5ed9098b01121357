"""Reply generation with short-term and long-term memory."""

from kioku.application.services.long_term_memory import LongTermMemoryManager
from kioku.config import PersonaConfig
from kioku.domain.entities import ReplyContext, ReplyRequest
from kioku.domain.services import ResponseGenerator, ShortTermContextProvider

DEFAULT_HISTORY_LIMIT = 10


class ReplyGenerator:
    """Produce the assistant's reply for one addressed message.

    Gathers the channel's recent turns and the user's long-term
    summary, then delegates prompt assembly and the model call
    to a ResponseGenerator.
    """

    def __init__(
        self,
        context_provider: ShortTermContextProvider,
        memory_manager: LongTermMemoryManager,
        response_generator: ResponseGenerator,
        persona: PersonaConfig,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        """Initialize the generator.

        Args:
            context_provider: Short-term context source.
            memory_manager: Long-term memory manager.
            response_generator: LLM-backed response generator.
            persona: Bot persona configuration.
            history_limit: Number of recent turns to include.
        """
        self._context_provider = context_provider
        self._memory_manager = memory_manager
        self._response_generator = response_generator
        self._persona = persona
        self._history_limit = history_limit

    async def generate(self, request: ReplyRequest) -> str:
        """Generate a reply.

        Args:
            request: Channel, user and cleaned user text.

        Returns:
            Reply text (never empty).

        Raises:
            GenerationError: If the model produced no usable reply.
            StoreError: If context could not be read.
        """
        history = await self._context_provider.get_context(
            request.channel_id, self._history_limit
        )
        long_term_memory = await self._memory_manager.read(request.user_id)

        context = ReplyContext(
            system_prompt=self._persona.system_prompt,
            long_term_memory=long_term_memory,
            history=history,
            user_text=request.user_text,
        )
        return await self._response_generator.generate(context)
