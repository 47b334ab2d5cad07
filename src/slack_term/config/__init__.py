"""設定管理モジュール"""

from slack_term.config.app import AppConfig, MarkdownConfig, load_app_config
from slack_term.config.config import Config, load_config
from slack_term.config.env import EnvConfig, load_env_config
from slack_term.config.theme import Theme, ThemeConfig, builtin_theme, resolve_theme

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "MarkdownConfig",
    "Theme",
    "ThemeConfig",
    "builtin_theme",
    "load_app_config",
    "load_config",
    "load_env_config",
    "resolve_theme",
]
