"""アプリケーション設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from slack_term.config.theme import ThemeConfig


class MarkdownConfig(BaseModel):
    """mrkdwnレンダリング設定"""

    enabled: bool = Field(default=True, description="Falseならメンション解決のみ行い装飾しない")
    syntax_theme: str = Field(default="monokai", description="コードブロックのPygmentsスタイル名")

    model_config = {"extra": "forbid"}


class AppConfig(BaseModel):
    """アプリケーション設定"""

    message_limit: int = Field(default=50, description="取得メッセージ数")
    show_timestamps: bool = Field(default=True, description="投稿時刻を表示するか")
    timestamp_format: str = Field(default="%H:%M", description="投稿時刻の書式（strftime）")
    markdown: MarkdownConfig = MarkdownConfig()
    theme: ThemeConfig = ThemeConfig()

    model_config = {"extra": "forbid"}


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                msg = f"Config file must be a mapping: {config_path}"
                raise ValueError(msg)
            return AppConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
