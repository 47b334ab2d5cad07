"""Slack APIの呼び出し失敗を表す例外"""


class SlackError(Exception):
    """slack-termのSlack連携で発生するエラーの基底クラス"""


class SlackAPIError(SlackError):
    """Slack APIが ok=false を返した場合のエラー

    Attributes:
        error_code: Slack APIの error フィールド（例: "channel_not_found"）
        action: 失敗した操作（例: "fetch channel history"）
    """

    def __init__(self, message: str, error_code: str, action: str = "") -> None:
        super().__init__(message)
        self.error_code = error_code
        self.action = action
