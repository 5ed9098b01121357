"""設定データクラス"""

from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_APOLOGY_MESSAGE = "Oops, something went wrong. Try again in a moment."


@dataclass
class SlackConfig:
    """Slack接続設定"""

    bot_token: str
    app_token: str


@dataclass
class LLMConfig:
    """LLM設定（LiteLLMのcompletionに渡すdict）"""

    model: str
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout_seconds: float = 60.0
    num_retries: int = 2


@dataclass
class PersonaConfig:
    """ペルソナ設定"""

    name: str
    system_prompt: str


@dataclass
class MemoryConfig:
    """記憶設定

    Attributes:
        database_path: SQLite データベースファイルのパス
        short_term_limit: 短期記憶として読み込むチャンネルの発言数
        summary_max_chars: 長期記憶（ユーザー要約）の最大文字数
    """

    database_path: str
    short_term_limit: int = 10
    summary_max_chars: int = 500


@dataclass
class ChatConfig:
    """会話設定

    Attributes:
        prefix: ボット宛てとみなすメッセージ先頭の記号
        apology_message: 応答生成に失敗した場合に送るメッセージ
    """

    prefix: str = "!"
    apology_message: str = DEFAULT_APOLOGY_MESSAGE


@dataclass
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    loggers: dict[str, str] | None = None
    debug_llm_messages: bool = False


@dataclass
class Config:
    """アプリケーション設定"""

    slack: SlackConfig
    llm: dict[str, LLMConfig]
    persona: PersonaConfig
    memory: MemoryConfig
    chat: ChatConfig
    logging: LoggingConfig | None = None
