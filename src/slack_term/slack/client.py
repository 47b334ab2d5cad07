"""Slack API操作を担当するクライアントクラス"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from slack_sdk.web.async_client import AsyncWebClient

from slack_term.slack.exceptions import SlackAPIError

# users.list / conversations.list の1ページあたりの取得件数
_PAGE_SIZE = 200


@dataclass
class SlackMessage:
    """Slackメッセージを表すデータクラス"""

    ts: str  # メッセージのタイムスタンプ
    text: str  # メッセージ本文（mrkdwn）
    user: str = ""  # 投稿者のユーザーID（botなどでは空）
    username: str = ""  # botやインテグレーションの表示名


def _check(response: Any, action: str) -> None:
    if not response.get("ok"):
        error_code = response.get("error", "unknown_error")
        raise SlackAPIError(f"Failed to {action}: {error_code}", error_code, action)


class SlackClient:
    """Slack API操作を担当するクライアントクラス"""

    def __init__(self, client: AsyncWebClient) -> None:
        """依存注入でAsyncWebClientを受け取る"""
        self._client = client

    async def fetch_channel_history(self, channel_id: str, limit: int = 100) -> list[SlackMessage]:
        """チャンネルの履歴をN件取得（新しい順）

        Raises:
            SlackAPIError: Slack API呼び出しでエラーが発生した場合
        """
        response = await self._client.conversations_history(
            channel=channel_id,
            limit=limit,
        )
        _check(response, "fetch channel history")

        return [
            SlackMessage(
                ts=msg["ts"],
                text=msg.get("text", ""),
                user=msg.get("user", ""),
                username=msg.get("username", ""),
            )
            for msg in response["messages"]
        ]

    async def _paginate(self, method: Callable[..., Awaitable[Any]], key: str, action: str) -> list[dict[str, Any]]:
        """cursorをたどって全ページの key 配列を連結する"""
        items: list[dict[str, Any]] = []
        cursor = None
        while True:
            kwargs: dict[str, Any] = {"limit": _PAGE_SIZE}
            if cursor:
                kwargs["cursor"] = cursor
            response = await method(**kwargs)
            _check(response, action)
            items.extend(response.get(key, []))

            cursor = (response.get("response_metadata") or {}).get("next_cursor")
            if not cursor:
                return items

    async def fetch_users(self) -> list[dict[str, Any]]:
        """ワークスペースの全ユーザーを取得

        Raises:
            SlackAPIError: Slack API呼び出しでエラーが発生した場合
        """
        return await self._paginate(self._client.users_list, "members", "fetch users")

    async def fetch_channels(self) -> list[dict[str, Any]]:
        """参照可能な全チャンネルを取得

        Raises:
            SlackAPIError: Slack API呼び出しでエラーが発生した場合
        """
        return await self._paginate(self._client.conversations_list, "channels", "fetch channels")
