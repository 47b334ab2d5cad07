import asyncio
import logging
import signal
from pathlib import Path

from rich.console import Console
from slack_sdk.web.async_client import AsyncWebClient

from slack_term.config import load_config
from slack_term.slack import SlackAPIError, SlackClient
from slack_term.viewer import show_channel

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main() -> None:
    """アプリケーションのエントリーポイント"""
    # 統合設定を読み込み
    config = load_config(Path("config.yaml"))
    logger.info(
        "Config loaded: message_limit=%d, markdown=%s, theme=%s",
        config.message_limit,
        config.markdown.enabled,
        config.theme.preset,
    )

    # Slack クライアントを初期化
    web_client = AsyncWebClient(token=config.slack_bot_token)
    slack_client = SlackClient(web_client)

    # 絵文字はレンダラーで解決済みなのでRich側では変換しない
    console = Console(emoji=False, highlight=False)
    try:
        await show_channel(slack_client, console, config)
    except SlackAPIError as e:
        logger.error("Slack API error (%s): %s", e.action or "unknown action", e.error_code)


def setup_signal_handlers(loop: asyncio.AbstractEventLoop, task: asyncio.Task) -> None:
    """シグナルハンドラを設定"""

    def handle_signal(sig: int) -> None:
        logger.info("Received signal %d, shutting down...", sig)
        task.cancel()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, lambda s=sig: handle_signal(s))


def run() -> None:
    """コマンドラインから起動する"""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    main_task = loop.create_task(main())
    setup_signal_handlers(loop, main_task)

    try:
        loop.run_until_complete(main_task)
    except asyncio.CancelledError:
        logger.info("Application stopped")
    finally:
        loop.close()


if __name__ == "__main__":
    run()
