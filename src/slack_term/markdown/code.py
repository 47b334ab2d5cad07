"""コードブロックのシンタックスハイライト"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import groupby

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from slack_term.markdown.style import StyleSpec, balance_backslashes, escape_markup

logger = logging.getLogger(__name__)

DEFAULT_SYNTAX_THEME = "default"

FENCE = "```"


def select_lexer(language: str) -> Lexer:
    """言語指定に対応するレキサーを返す。空・未知の指定ではプレーンテキスト"""
    if language:
        try:
            return get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug("Unknown code block language: %s", language)
    return TextLexer(stripnl=False, ensurenl=False)


def select_style(syntax_theme: str) -> StyleMeta:
    """テーマ名に対応するPygmentsスタイルを返す。未知の名前では既定スタイル"""
    try:
        return get_style_by_name(syntax_theme)
    except ClassNotFound:
        logger.debug("Unknown syntax theme: %s", syntax_theme)
        return get_style_by_name(DEFAULT_SYNTAX_THEME)


def _highlight(code: str, lexer: Lexer, style: StyleMeta) -> Iterator[str]:
    # 装飾なしのトークンは連結してからエスケープする
    # （"[" と "red]" を別々にエスケープすると連結後にタグとして解釈されてしまう）
    plain: list[str] = []
    # 同じ種類のトークンが連続する場合はまとめて1つのタグにする
    for token_type, tokens in groupby(lexer.get_tokens(code), key=lambda t: t[0]):
        text = "".join(value for _, value in tokens)
        entry = style.style_for_token(token_type)
        color = entry["color"]
        # ansi系の色名はRichの色指定に対応しないので装飾しない
        if not color or color.startswith("ansi"):
            plain.append(text)
            continue
        if plain:
            yield balance_backslashes(escape_markup("".join(plain)))
            plain.clear()
        attributes = frozenset(name for name in ("bold", "italic") if entry[name])
        yield StyleSpec(foreground=f"#{color}", attributes=attributes).wrap(escape_markup(text))
    if plain:
        yield escape_markup("".join(plain))


def render_code_block(language: str, code: str, syntax_theme: str, fence_style: StyleSpec) -> str:
    """フェンス付きコードブロックをハイライトしたマークアップにする

    ハイライトに失敗した場合はエスケープしただけのコードを返す。
    例外は送出しない。

    Args:
        language: 言語指定（空文字列可）
        code: フェンスを除いたコード
        syntax_theme: Pygmentsのスタイル名
        fence_style: フェンスと言語名のスタイル

    Returns:
        str: Richマークアップ
    """
    fence = fence_style.wrap(FENCE)
    header = fence
    if language:
        header += fence_style.wrap(escape_markup(language))

    # 末尾の改行はトークンに含まれて色付けされるので、字句解析の前に取り除く
    code = code.rstrip("\n")
    try:
        body = "".join(_highlight(code, select_lexer(language), select_style(syntax_theme)))
    except Exception:
        logger.warning("Failed to highlight code block (language=%r)", language, exc_info=True)
        body = escape_markup(code)

    return f"{header}\n{body}\n{fence}"
