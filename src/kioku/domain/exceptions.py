"""Domain exceptions."""


class StoreError(Exception):
    """永続化ストアの操作に失敗した場合に発生する例外

    接続断や制約違反（不正な role など）で発生する。
    """


class GenerationError(Exception):
    """返答を生成できなかった場合に発生する例外

    LLM の呼び出し失敗、タイムアウト、空の応答で発生する。
    """


class ChannelNotAccessibleError(Exception):
    """チャンネルにアクセスできない場合に発生する例外

    ボットがチャンネルから退出した場合や、
    チャンネルがアーカイブされた場合などに発生する。
    """

    def __init__(self, channel_id: str, message: str = "") -> None:
        """初期化

        Args:
            channel_id: アクセスできないチャンネルのID
            message: エラーメッセージ（オプション）
        """
        self.channel_id = channel_id
        super().__init__(message or f"Channel {channel_id} is not accessible")


class SummarizationError(Exception):
    """長期記憶の要約を更新できなかった場合に発生する例外

    会話の処理には影響させず、警告として扱う。
    """
