"""Request/response logging for LLM calls."""

import logging


class LLMMessageLogger:
    """Log LLM request messages and responses.

    Messages are logged at INFO when debug_llm_messages is enabled,
    otherwise at DEBUG (and only if the logger is enabled for DEBUG).
    """

    def __init__(self, logger: logging.Logger, debug_llm_messages: bool = False):
        self._logger = logger
        self._debug_llm_messages = debug_llm_messages

    def should_log(self) -> bool:
        """Check if logging should occur."""
        return self._debug_llm_messages or self._logger.isEnabledFor(logging.DEBUG)

    def log_messages(self, messages: list[dict[str, str]]) -> None:
        """Log LLM request messages."""
        if not self.should_log():
            return
        log_func = self._log_func()
        log_func("=== LLM Request Messages ===")
        for i, msg in enumerate(messages):
            log_func("[%d] role=%s", i, msg.get("role", "unknown"))
            log_func("    content: %s", msg.get("content", ""))
        log_func("=== End of Messages ===")

    def log_response(self, response: str) -> None:
        """Log LLM response."""
        if not self.should_log():
            return
        log_func = self._log_func()
        log_func("=== LLM Response ===")
        log_func("response: %s", response)
        log_func("=== End of Response ===")

    def _log_func(self):
        if self._debug_llm_messages:
            return self._logger.info
        return self._logger.debug
