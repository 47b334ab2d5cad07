"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slack_term.config.app import MarkdownConfig, load_app_config
from slack_term.config.env import load_env_config
from slack_term.config.theme import Theme, resolve_theme


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    slack_bot_token: str = Field(..., description="Slack Bot User OAuth Token (xoxb-)")
    slack_channel_id: str = Field(..., description="表示するSlackチャンネルのID")

    # config.yaml由来
    message_limit: int = Field(default=50, description="取得メッセージ数")
    show_timestamps: bool = Field(default=True, description="投稿時刻を表示するか")
    timestamp_format: str = Field(default="%H:%M", description="投稿時刻の書式（strftime）")
    markdown: MarkdownConfig = MarkdownConfig()
    theme: Theme = Theme()

    model_config = {"extra": "forbid"}


def load_config(config_path: Path) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    テーマはプリセットを解決し、設定ファイルでの上書きを適用した状態で返す。

    Args:
        config_path: YAMLファイルのパス

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 必須の環境変数が欠けている場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path)

    return Config(
        slack_bot_token=env_config.slack_bot_token,
        slack_channel_id=env_config.slack_channel_id,
        message_limit=app_config.message_limit,
        show_timestamps=app_config.show_timestamps,
        timestamp_format=app_config.timestamp_format,
        markdown=app_config.markdown,
        theme=resolve_theme(app_config.theme),
    )
