"""Slackの山括弧トークン（<@U123>, <#C123|name>, <!here>, <url|label>）の解釈"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from slack_term.markdown.style import MarkdownStyles, StyleSpec, escape_markup

TOKEN_PATTERN = re.compile(r"<([^>]+)>")

Directory = Mapping[str, str]


def _split_label(body: str) -> tuple[str, str | None]:
    """最初の | で識別子とラベルに分ける。空のラベルはラベルなし扱い"""
    target, _, label = body.partition("|")
    return target, label or None


@dataclass(frozen=True)
class UserMention:
    """ユーザーメンション <@U123> / <@U123|name>"""

    user_id: str
    label: str | None = None

    def display(self, users: Directory, channels: Directory) -> str:
        return self.label or users.get(self.user_id) or self.user_id

    def style(self, styles: MarkdownStyles) -> StyleSpec:
        return styles.user_mention


@dataclass(frozen=True)
class ChannelMention:
    """チャンネルメンション <#C123> / <#C123|name>"""

    channel_id: str
    label: str | None = None

    def display(self, users: Directory, channels: Directory) -> str:
        return "#" + (self.label or channels.get(self.channel_id) or self.channel_id)

    def style(self, styles: MarkdownStyles) -> StyleSpec:
        return styles.channel_mention


@dataclass(frozen=True)
class SpecialMention:
    """特殊メンション <!here>, <!channel>, <!everyone>"""

    keyword: str
    label: str | None = None

    def display(self, users: Directory, channels: Directory) -> str:
        return self.label or f"@{self.keyword}"

    def style(self, styles: MarkdownStyles) -> StyleSpec:
        return styles.special_mention


@dataclass(frozen=True)
class Link:
    """リンク <url> / <url|label>"""

    url: str
    label: str | None = None

    def display(self, users: Directory, channels: Directory) -> str:
        return self.label or self.url

    def style(self, styles: MarkdownStyles) -> StyleSpec:
        return styles.link


Token = UserMention | ChannelMention | SpecialMention | Link


def parse_token(inner: str) -> Token:
    """山括弧の中身を先頭文字で分類する

    Args:
        inner: "<" と ">" を除いた中身

    Returns:
        Token: 先頭が @ ならユーザー、# ならチャンネル、! なら特殊メンション、
            それ以外はリンク
    """
    if inner.startswith("@"):
        return UserMention(*_split_label(inner[1:]))
    if inner.startswith("#"):
        return ChannelMention(*_split_label(inner[1:]))
    if inner.startswith("!"):
        return SpecialMention(*_split_label(inner[1:]))
    return Link(*_split_label(inner))


def render_token(token: Token, users: Directory, channels: Directory, styles: MarkdownStyles) -> str:
    """トークンを役割ごとのスタイル付きマークアップにする"""
    return token.style(styles).wrap(escape_markup(token.display(users, channels)))


def resolve_tokens(text: str, users: Directory, channels: Directory) -> str:
    """テキスト中の全トークンを装飾なしの表示文字列に置き換える"""
    return TOKEN_PATTERN.sub(lambda m: parse_token(m.group(1)).display(users, channels), text)
