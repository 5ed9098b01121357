"""アプリケーションのエントリポイント"""

import asyncio
import logging
import os
import signal
import sys
from pathlib import Path

from kioku.application.services import (
    BackgroundMemoryUpdater,
    KeyedLock,
    LongTermMemoryManager,
    ReplyGenerator,
)
from kioku.application.use_cases import HandleMessageUseCase, MemoryCommandsUseCase
from kioku.config import ConfigError, LoggingConfig, load_config
from kioku.infrastructure.llm import (
    LiteLLMResponseGenerator,
    LLMClient,
    LLMMemorySummarizer,
)
from kioku.infrastructure.persistence import (
    DatabaseManager,
    DBShortTermContextProvider,
    SQLiteTurnRepository,
    SQLiteUserMemoryRepository,
)
from kioku.infrastructure.slack import (
    SlackAppRunner,
    SlackEventAdapter,
    SlackMessagingService,
    create_slack_app,
)
from kioku.presentation import register_handlers

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "KIOKU_CONFIG"


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    root_logger = logging.getLogger()
    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


async def main() -> None:
    """アプリケーションを起動する"""
    config_path = Path(os.environ.get(CONFIG_PATH_ENV, "config.yaml"))
    if not config_path.exists():
        logger.error("%s not found", config_path)
        sys.exit(1)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    configure_logging(config.logging)
    debug_llm_messages = bool(config.logging and config.logging.debug_llm_messages)

    app = create_slack_app(config.slack)

    messaging_service = SlackMessagingService(app.client)
    bot_user_id = await messaging_service.get_bot_user_id()
    logger.info("Bot user ID: %s", bot_user_id)

    # The engine (connection pool) is shared by every repository
    db_manager = DatabaseManager(config.memory.database_path)
    await db_manager.create_tables()

    turn_repository = SQLiteTurnRepository(db_manager.get_session)
    user_memory_repository = SQLiteUserMemoryRepository(db_manager.get_session)
    context_provider = DBShortTermContextProvider(
        turn_repository, default_limit=config.memory.short_term_limit
    )

    reply_client = LLMClient(config.llm["default"])
    summary_client = LLMClient(config.llm.get("summary", config.llm["default"]))

    memory_manager = LongTermMemoryManager(
        user_memory_repository,
        LLMMemorySummarizer(summary_client, debug_llm_messages=debug_llm_messages),
        max_chars=config.memory.summary_max_chars,
        locks=KeyedLock(),
    )
    memory_updater = BackgroundMemoryUpdater(memory_manager)

    reply_generator = ReplyGenerator(
        context_provider=context_provider,
        memory_manager=memory_manager,
        response_generator=LiteLLMResponseGenerator(
            reply_client, debug_llm_messages=debug_llm_messages
        ),
        persona=config.persona,
        history_limit=config.memory.short_term_limit,
    )

    handle_message_use_case = HandleMessageUseCase(
        turn_repository=turn_repository,
        reply_generator=reply_generator,
        messaging_service=messaging_service,
        memory_updater=memory_updater,
        chat_config=config.chat,
        bot_user_id=bot_user_id,
        channel_locks=KeyedLock(),
    )
    memory_commands_use_case = MemoryCommandsUseCase(
        memory_manager=memory_manager,
        turn_repository=turn_repository,
    )

    register_handlers(
        app,
        handle_message_use_case,
        memory_commands_use_case,
        SlackEventAdapter(bot_user_id),
        config.chat.apology_message,
    )

    runner = SlackAppRunner(app, config.slack.app_token)

    logger.info("Starting %s...", config.persona.name)
    logger.info("Starting Socket Mode handler...")
    runner_task = asyncio.create_task(runner.start())

    # Setup signal handlers for graceful shutdown
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("Received shutdown signal...")
        stop_event.set()

    loop.add_signal_handler(signal.SIGINT, shutdown_handler)
    loop.add_signal_handler(signal.SIGTERM, shutdown_handler)

    await stop_event.wait()

    logger.info("Shutting down...")

    closed = await runner.close(timeout=5.0)
    if not closed:
        logger.warning("Runner close timed out, cancelling tasks...")
    runner_task.cancel()
    await asyncio.gather(runner_task, return_exceptions=True)

    # Let in-flight memory updates finish before the pool goes away
    await memory_updater.stop(timeout=10.0)

    await db_manager.close()

    logger.info("Shutdown complete")


def run() -> None:
    """Run the async main function."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
