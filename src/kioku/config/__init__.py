"""設定管理モジュール"""

from kioku.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from kioku.config.models import (
    ChatConfig,
    Config,
    LLMConfig,
    LoggingConfig,
    MemoryConfig,
    PersonaConfig,
    SlackConfig,
)

__all__ = [
    "ChatConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LLMConfig",
    "LoggingConfig",
    "MemoryConfig",
    "PersonaConfig",
    "SlackConfig",
    "expand_env_vars",
    "load_config",
]
