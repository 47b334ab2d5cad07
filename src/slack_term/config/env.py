"""環境変数設定"""

import os

from pydantic import BaseModel, Field, ValidationError

# 環境変数名 → EnvConfig のフィールド名
ENV_VARS = {
    "SLACK_BOT_TOKEN": "slack_bot_token",
    "SLACK_CHANNEL_ID": "slack_channel_id",
}


class EnvConfig(BaseModel):
    """Slackへの接続情報（.env または環境変数から読み込む）"""

    slack_bot_token: str = Field(..., min_length=1, description="履歴を読むBot User OAuth Token (xoxb-)")
    slack_channel_id: str = Field(..., min_length=1, description="表示するチャンネルのID（例: C0123456789）")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """環境変数からSlackへの接続情報を読み込む

    Returns:
        EnvConfig: 環境変数設定

    Raises:
        ValueError: SLACK_BOT_TOKEN / SLACK_CHANNEL_ID が未設定または空の場合
    """
    missing = [name for name in ENV_VARS if not os.environ.get(name)]
    if missing:
        msg = f"Required environment variable is missing: {', '.join(missing)} (set it in .env or the environment)"
        raise ValueError(msg)

    try:
        return EnvConfig(**{field: os.environ[name] for name, field in ENV_VARS.items()})
    except ValidationError as e:
        msg = f"Invalid environment variable: {e}"
        raise ValueError(msg) from e
