"""ユーザー・チャンネルのID→名前ディレクトリ"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from slack_term.slack.client import SlackClient

logger = logging.getLogger(__name__)


def user_display_name(member: dict[str, Any]) -> str:
    """ユーザーの表示名を返す（表示名 → ユーザー名 → ID の順にフォールバック）"""
    profile = member.get("profile") or {}
    return profile.get("display_name") or member.get("name") or member.get("id", "")


@dataclass(frozen=True)
class Directories:
    """レンダラーに渡すID→名前のマップ"""

    users: dict[str, str] = field(default_factory=dict)
    channels: dict[str, str] = field(default_factory=dict)

    def user_name(self, user_id: str, fallback: str = "") -> str:
        """メッセージ投稿者の表示名（未知のIDなら fallback、それもなければID）"""
        return self.users.get(user_id) or fallback or user_id


async def load_directories(client: SlackClient) -> Directories:
    """Slack APIからユーザーとチャンネルの一覧を取得してディレクトリを作る

    Raises:
        SlackAPIError: Slack API呼び出しでエラーが発生した場合
    """
    members = await client.fetch_users()
    channels = await client.fetch_channels()

    directories = Directories(
        users={m["id"]: user_display_name(m) for m in members if m.get("id")},
        channels={c["id"]: c.get("name") or c["id"] for c in channels if c.get("id")},
    )
    logger.info("Directories loaded: users=%d, channels=%d", len(directories.users), len(directories.channels))
    return directories
