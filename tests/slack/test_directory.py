"""ユーザー・チャンネルディレクトリのテスト"""

from unittest.mock import AsyncMock

import pytest

from slack_term.slack.client import SlackClient
from slack_term.slack.directory import Directories, load_directories, user_display_name
from slack_term.slack.exceptions import SlackAPIError


class TestUserDisplayName:
    """user_display_name関数のテスト"""

    def test_display_name(self) -> None:
        """表示名があれば表示名を使うこと"""
        member = {"id": "U1", "name": "alice", "profile": {"display_name": "Alice"}}
        assert user_display_name(member) == "Alice"

    def test_empty_display_name_falls_back_to_name(self) -> None:
        """表示名が空ならユーザー名を使うこと"""
        member = {"id": "U1", "name": "alice", "profile": {"display_name": ""}}
        assert user_display_name(member) == "alice"

    def test_falls_back_to_id(self) -> None:
        """名前がなければIDを使うこと"""
        assert user_display_name({"id": "U1"}) == "U1"


class TestDirectories:
    """Directoriesクラスのテスト"""

    def test_user_name(self) -> None:
        """既知のIDは表示名、未知のIDは代替名またはIDになること"""
        directories = Directories(users={"U1": "Alice"})
        assert directories.user_name("U1", "bot") == "Alice"
        assert directories.user_name("U9", "deploy-bot") == "deploy-bot"
        assert directories.user_name("U9") == "U9"


@pytest.mark.asyncio
async def test_load_directories(web_client: AsyncMock) -> None:
    """ユーザー一覧とチャンネル一覧からディレクトリを作ること"""
    web_client.users_list.return_value = {
        "ok": True,
        "members": [
            {"id": "U1", "name": "alice", "profile": {"display_name": "Alice"}},
            {"id": "U2", "name": "bob", "profile": {}},
            {"name": "no-id"},
        ],
    }
    web_client.conversations_list.return_value = {
        "ok": True,
        "channels": [{"id": "C1", "name": "general"}, {"id": "C2"}],
    }

    directories = await load_directories(SlackClient(web_client))

    assert directories.users == {"U1": "Alice", "U2": "bob"}
    assert directories.channels == {"C1": "general", "C2": "C2"}


@pytest.mark.asyncio
async def test_load_directories_propagates_error(web_client: AsyncMock) -> None:
    """API呼び出しの失敗はそのまま送出すること"""
    web_client.users_list.return_value = {"ok": False, "error": "invalid_auth"}

    with pytest.raises(SlackAPIError):
        await load_directories(SlackClient(web_client))
