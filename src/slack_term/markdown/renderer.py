"""Slack mrkdwn → Richマークアップ変換

Render が唯一の入口。どんな入力に対しても文字列を返し、例外は送出しない。
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from slack_term.markdown.code import render_code_block
from slack_term.markdown.emoji import lookup_emoji
from slack_term.markdown.fragments import Fragments, Group, Node
from slack_term.markdown.segments import CodeSegment, split_code_blocks
from slack_term.markdown.style import MarkdownStyles, StyleSpec, balance_backslashes, escape_markup
from slack_term.markdown.tokens import TOKEN_PATTERN, Directory, parse_token, render_token, resolve_tokens

# インラインコード: `text`（改行をまたがない）
INLINE_CODE_PATTERN = re.compile(r"`([^`\n]+)`")

# 引用: 行頭の空白に続く "> 本文" または ">" のみの行
BLOCKQUOTE_PATTERN = re.compile(r"^[ \t]*>(?: (.*))?$", re.MULTILINE)
BLOCKQUOTE_MARK = "▎"

# 強調は太字 → 斜体 → 取り消し線の順に適用する
EMPHASIS_RULES: tuple[tuple[re.Pattern[str], StyleSpec], ...] = (
    (re.compile(r"\*([^*\n]+)\*"), StyleSpec(attributes=frozenset({"bold"}))),
    (re.compile(r"_([^_\n]+)_"), StyleSpec(attributes=frozenset({"italic"}))),
    (re.compile(r"~([^~\n]+)~"), StyleSpec(attributes=frozenset({"strikethrough"}))),
)

EMOJI_PATTERN = re.compile(r":([a-z0-9_+\-]+):")


def render(
    text: str,
    users: Directory,
    channels: Directory,
    enabled: bool,
    syntax_theme: str,
    styles: MarkdownStyles | None = None,
) -> str:
    """Slack mrkdwnテキストをRichマークアップに変換する

    Args:
        text: Slackのメッセージ本文
        users: ユーザーID→表示名
        channels: チャンネルID→チャンネル名
        enabled: Falseならトークンを素の表示文字列に解決してエスケープするだけ
        syntax_theme: コードブロックに使うPygmentsのスタイル名
        styles: 役割ごとのスタイル（Noneなら既定値）

    Returns:
        str: Richマークアップ
    """
    if not enabled:
        return escape_markup(resolve_tokens(text, users, channels))

    styles = styles or MarkdownStyles()
    parts = []
    for segment in split_code_blocks(text):
        if isinstance(segment, CodeSegment):
            # コードブロックはタグで始まるので、直前のテキスト末尾の "\" を揃える
            if parts:
                parts[-1] = balance_backslashes(parts[-1])
            parts.append(render_code_block(segment.language, segment.code, syntax_theme, styles.code_fence))
        else:
            parts.append(render_inline(segment.text, users, channels, styles))
    return "".join(parts)


def render_inline(text: str, users: Directory, channels: Directory, styles: MarkdownStyles) -> str:
    """コードブロック以外のテキストを変換する"""
    doc = Fragments(text)
    _extract_tokens(doc, users, channels, styles)
    _extract_inline_code(doc, styles)
    _render_blockquotes(doc, styles)
    for pattern, style in EMPHASIS_RULES:
        _apply_emphasis(doc, pattern, style)
    _resolve_emoji(doc)
    # エスケープは最後に保護ノードで区切られた単位で行う（エスケープ済みの "[...]" の間にタグを挟まないため）
    doc.map_text(escape_markup)
    return doc.restore()


def _extract_tokens(doc: Fragments, users: Directory, channels: Directory, styles: MarkdownStyles) -> None:
    doc.sub(
        TOKEN_PATTERN,
        lambda m, group: [doc.protect(render_token(parse_token(m.group(1)), users, channels, styles))],
    )


def _extract_inline_code(doc: Fragments, styles: MarkdownStyles) -> None:
    def replace(match: re.Match[str], group: Group) -> Sequence[Node]:
        content = Fragments.markup(escape_markup(node) if isinstance(node, str) else node for node in group(1))
        return [doc.protect(styles.inline_code.wrap(f"`{content}`"))]

    doc.sub(INLINE_CODE_PATTERN, replace)


def _render_blockquotes(doc: Fragments, styles: MarkdownStyles) -> None:
    mark = styles.blockquote_mark.wrap(BLOCKQUOTE_MARK)
    body_style = styles.blockquote_text

    def replace(match: re.Match[str], group: Group) -> Sequence[Node]:
        if match.group(1) is None:
            return [doc.protect(mark)]
        return [
            doc.protect(mark),
            " ",
            doc.protect(body_style.tag()),
            *group(1),
            doc.protect(body_style.reset()),
        ]

    doc.sub(BLOCKQUOTE_PATTERN, replace)


def _apply_emphasis(doc: Fragments, pattern: re.Pattern[str], style: StyleSpec) -> None:
    # タグ自体を保護ノードにするので、後続の強調パターンがタグ文字列にマッチすることはない
    doc.sub(
        pattern,
        lambda m, group: [doc.protect(style.tag()), *group(1), doc.protect(style.reset())],
    )


def _resolve_emoji(doc: Fragments) -> None:
    doc.sub(EMOJI_PATTERN, lambda m, group: [lookup_emoji(m.group(1))])
