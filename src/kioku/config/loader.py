"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from kioku.config.models import (
    DEFAULT_APOLOGY_MESSAGE,
    DEFAULT_LOG_FORMAT,
    ChatConfig,
    Config,
    LLMConfig,
    LoggingConfig,
    MemoryConfig,
    PersonaConfig,
    SlackConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する"""
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    if not isinstance(data, dict) or field not in data or data[field] is None:
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _load_llm_configs(llm_data: dict[str, Any]) -> dict[str, LLMConfig]:
    """llm セクションを LLMConfig の dict に変換する（default は必須）"""
    _validate_required_field(llm_data, "default", "llm")
    llm: dict[str, LLMConfig] = {}
    for key, llm_item in llm_data.items():
        model = _validate_required_field(llm_item, "model", f"llm.{key}")
        llm[key] = LLMConfig(
            model=model,
            temperature=llm_item.get("temperature", 0.7),
            max_tokens=llm_item.get("max_tokens", 1000),
            timeout_seconds=llm_item.get("timeout_seconds", 60.0),
            num_retries=llm_item.get("num_retries", 2),
        )
    return llm


def _load_memory_config(memory_data: dict[str, Any]) -> MemoryConfig:
    memory = MemoryConfig(
        database_path=_validate_required_field(memory_data, "database_path", "memory"),
        short_term_limit=memory_data.get("short_term_limit", 10),
        summary_max_chars=memory_data.get("summary_max_chars", 500),
    )
    if memory.short_term_limit < 1:
        raise ConfigValidationError("'memory.short_term_limit' must be positive")
    if memory.summary_max_chars < 1:
        raise ConfigValidationError("'memory.summary_max_chars' must be positive")
    return memory


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 必須項目が欠落
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f) or {}

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    # 必須セクションの検証
    slack_data = _validate_required_field(data, "slack")
    llm_data = _validate_required_field(data, "llm")
    persona_data = _validate_required_field(data, "persona")
    memory_data = _validate_required_field(data, "memory")

    slack = SlackConfig(
        bot_token=_validate_required_field(slack_data, "bot_token", "slack"),
        app_token=_validate_required_field(slack_data, "app_token", "slack"),
    )

    persona = PersonaConfig(
        name=_validate_required_field(persona_data, "name", "persona"),
        system_prompt=_validate_required_field(
            persona_data, "system_prompt", "persona"
        ),
    )

    # ChatConfig (optional)
    chat_data = data.get("chat") or {}
    chat = ChatConfig(
        prefix=chat_data.get("prefix", "!"),
        apology_message=chat_data.get("apology_message", DEFAULT_APOLOGY_MESSAGE),
    )
    if not chat.prefix:
        raise ConfigValidationError("'chat.prefix' must not be empty")

    # LoggingConfig (optional)
    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data:
        logging_config = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get("format", DEFAULT_LOG_FORMAT),
            loggers=logging_data.get("loggers"),
            debug_llm_messages=logging_data.get("debug_llm_messages", False),
        )

    return Config(
        slack=slack,
        llm=_load_llm_configs(llm_data),
        persona=persona,
        memory=_load_memory_config(memory_data),
        chat=chat,
        logging=logging_config,
    )
