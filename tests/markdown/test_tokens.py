"""山括弧トークンのテスト"""

import pytest

from slack_term.markdown.style import MarkdownStyles
from slack_term.markdown.tokens import (
    ChannelMention,
    Link,
    SpecialMention,
    UserMention,
    parse_token,
    render_token,
    resolve_tokens,
)

USERS = {"U1": "Alice", "U2": ""}
CHANNELS = {"C1": "general"}


class TestParseToken:
    """parse_token関数のテスト"""

    @pytest.mark.parametrize(
        ("inner", "expected"),
        [
            ("@U1", UserMention("U1")),
            ("@U1|alice", UserMention("U1", "alice")),
            ("#C1", ChannelMention("C1")),
            ("#C1|general", ChannelMention("C1", "general")),
            ("!here", SpecialMention("here")),
            ("!subteam^S1|@team", SpecialMention("subteam^S1", "@team")),
            ("https://example.com", Link("https://example.com")),
            ("https://example.com|Example", Link("https://example.com", "Example")),
            ("mailto:a@example.com|a|b", Link("mailto:a@example.com", "a|b")),
        ],
    )
    def test_classification(self, inner: str, expected: object) -> None:
        """先頭文字で分類し、最初の | でラベルを分ける"""
        assert parse_token(inner) == expected

    def test_empty_label_is_absent(self) -> None:
        """空のラベルはラベルなし扱い"""
        assert parse_token("@U1|") == UserMention("U1")


class TestDisplay:
    """各トークンの表示文字列のテスト"""

    def test_user_from_directory(self) -> None:
        """ディレクトリの表示名"""
        assert UserMention("U1").display(USERS, CHANNELS) == "Alice"

    def test_user_label_wins(self) -> None:
        """ラベルはディレクトリより優先"""
        assert UserMention("U1", "ally").display(USERS, CHANNELS) == "ally"

    def test_user_unknown_falls_back_to_id(self) -> None:
        """未知のユーザーはID"""
        assert UserMention("U999").display(USERS, CHANNELS) == "U999"

    def test_user_empty_name_falls_back_to_id(self) -> None:
        """表示名が空ならID"""
        assert UserMention("U2").display(USERS, CHANNELS) == "U2"

    def test_channel(self) -> None:
        """チャンネルは # 付き"""
        assert ChannelMention("C1").display(USERS, CHANNELS) == "#general"
        assert ChannelMention("C9").display(USERS, CHANNELS) == "#C9"

    def test_special(self) -> None:
        """特殊メンションは @ 付きのキーワード"""
        assert SpecialMention("channel").display(USERS, CHANNELS) == "@channel"
        assert SpecialMention("here", "here").display(USERS, CHANNELS) == "here"

    def test_link(self) -> None:
        """リンクはラベル、なければURL"""
        assert Link("https://example.com").display(USERS, CHANNELS) == "https://example.com"
        assert Link("https://example.com", "Example").display(USERS, CHANNELS) == "Example"

    def test_directories_not_mutated(self) -> None:
        """解決時にディレクトリを変更しない"""
        users = dict(USERS)
        UserMention("U999").display(users, CHANNELS)
        assert users == USERS


class TestRenderToken:
    """render_token関数のテスト"""

    styles = MarkdownStyles()

    def test_user_mention_style(self) -> None:
        """ユーザーメンションのスタイル"""
        assert render_token(UserMention("U1"), USERS, CHANNELS, self.styles) == "[bold yellow]Alice[/bold yellow]"

    def test_link_style(self) -> None:
        """リンクのスタイル"""
        result = render_token(Link("https://example.com", "Click here"), USERS, CHANNELS, self.styles)
        assert result == "[underline blue]Click here[/underline blue]"

    def test_label_is_escaped(self) -> None:
        """ラベル中のタグはエスケープされる"""
        result = render_token(UserMention("U1", "[red]x"), USERS, CHANNELS, self.styles)
        assert result == "[bold yellow]\\[red]x[/bold yellow]"


class TestResolveTokens:
    """resolve_tokens関数のテスト"""

    def test_plain_resolution(self) -> None:
        """全トークンを素の表示文字列にする"""
        text = "hi <@U1>, see <#C1> <!here> <https://example.com|docs>"
        assert resolve_tokens(text, USERS, CHANNELS) == "hi Alice, see #general @here docs"

    def test_unterminated_bracket_is_left_alone(self) -> None:
        """閉じていない < はそのまま"""
        assert resolve_tokens("a <@U1 b", USERS, CHANNELS) == "a <@U1 b"
