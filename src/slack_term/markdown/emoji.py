"""Slack互換の絵文字ショートコード表"""

from __future__ import annotations

import re
import threading
from collections.abc import Mapping
from types import MappingProxyType

import emoji

# Slackのショートコードは小文字・数字・_ - + のみで構成される
SHORTCODE_PATTERN = re.compile(r"[a-z0-9_+\-]+")

_entries: Mapping[str, str] | None = None
_entries_lock = threading.Lock()


def is_slack_shortcode(name: str) -> bool:
    """Slackのショートコード規約に沿った名前かどうかを判定する"""
    return SHORTCODE_PATTERN.fullmatch(name) is not None


def _build_entries() -> Mapping[str, str]:
    """emojiパッケージのデータから name→絵文字 の表を作る。

    英語名とエイリアスの両方を候補にし、Slackのショートコード規約に
    合わない名前（大文字や括弧を含むものなど）は除外する。
    同じ名前が複数ある場合は最初に登録された絵文字を採用する。
    """
    result: dict[str, str] = {}
    for glyph, data in emoji.EMOJI_DATA.items():
        names = [data.get("en", ""), *data.get("alias", [])]
        for code in names:
            name = code.strip(":")
            if is_slack_shortcode(name):
                result.setdefault(name, glyph)
    return MappingProxyType(result)


def emoji_entries() -> Mapping[str, str]:
    """全ショートコード（コロンなし）→絵文字 の読み取り専用マップを返す。

    初回呼び出し時に一度だけ構築し、以降はキャッシュを返す。
    """
    global _entries
    entries = _entries
    if entries is not None:
        return entries
    with _entries_lock:
        if _entries is None:
            _entries = _build_entries()
        return _entries


def lookup_emoji(name: str) -> str:
    """ショートコード名（コロンなし）に対応する絵文字を返す。

    未知の名前は ":name:" のまま返す。
    """
    glyph = emoji_entries().get(name)
    if glyph is None:
        return f":{name}:"
    return glyph
