"""チャンネル履歴の表示"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from rich.console import Console

from slack_term.config import Config
from slack_term.markdown import escape_markup, render
from slack_term.slack import Directories, SlackClient, SlackMessage, load_directories

logger = logging.getLogger(__name__)

BODY_INDENT = "  "


def format_timestamp(ts: str, fmt: str, tz: tzinfo | None = None) -> str:
    """Slackのts（"1700000000.123456"）を書式化する。解釈できなければ空文字列"""
    try:
        return datetime.fromtimestamp(float(ts), tz=tz).strftime(fmt)
    except (ValueError, OverflowError, OSError):
        logger.debug("Unparsable message timestamp: %s", ts)
        return ""


def format_message(message: SlackMessage, directories: Directories, config: Config, tz: tzinfo | None = None) -> str:
    """1件のメッセージを「時刻 投稿者」行と字下げした本文のマークアップにする"""
    styles = config.theme.messages

    header = styles.author.wrap(escape_markup(directories.user_name(message.user, message.username)))
    if config.show_timestamps:
        timestamp = format_timestamp(message.ts, config.timestamp_format, tz)
        if timestamp:
            header = f"{styles.timestamp.wrap(escape_markup(timestamp))} {header}"

    lines = [header]
    if message.text:
        body = render(
            message.text,
            directories.users,
            directories.channels,
            config.markdown.enabled,
            config.markdown.syntax_theme,
            config.theme.markdown,
        )
        lines.extend(BODY_INDENT + line for line in body.split("\n"))
    return "\n".join(lines)


async def show_channel(client: SlackClient, console: Console, config: Config) -> int:
    """チャンネルの履歴を古い順に表示する

    Args:
        client: Slackクライアント
        console: 出力先（絵文字は変換済みなので emoji=False で作成したもの）
        config: 統合設定

    Returns:
        int: 表示したメッセージ数

    Raises:
        SlackAPIError: Slack API呼び出しに失敗した場合
    """
    directories = await load_directories(client)
    messages = await client.fetch_channel_history(config.slack_channel_id, limit=config.message_limit)
    logger.info("Fetched %d messages from %s", len(messages), config.slack_channel_id)

    # conversations.history は新しい順に返す
    for message in reversed(messages):
        console.print(format_message(message, directories, config))
    return len(messages)
