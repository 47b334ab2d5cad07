"""Richマークアップのスタイルタグ定義"""

from typing import Literal

from pydantic import BaseModel, field_validator
from rich.markup import escape

Attribute = Literal["bold", "italic", "underline", "dim", "reverse", "blink", "strikethrough"]

# タグ内の属性の並び順（出力を決定的にするため固定）
ATTRIBUTE_ORDER: tuple[Attribute, ...] = (
    "bold",
    "italic",
    "underline",
    "dim",
    "reverse",
    "blink",
    "strikethrough",
)

# Richのスタイル名と異なるものだけ対応付ける
_RICH_ATTRIBUTE_NAMES = {"strikethrough": "strike"}

# 装飾なしのスタイル（指定が空でもタグは省略しない）
NO_STYLE = "none"


def _trailing_backslashes(text: str) -> int:
    return len(text) - len(text.rstrip("\\"))


def escape_markup(text: str) -> str:
    """ユーザー入力がRichのマークアップタグとして解釈されないようにエスケープする。

    rich.markup.escape は末尾の "\\" を後続のタグに備えて二重にするが、
    ここでは行わない。直後にタグを連結する側で balance_backslashes を通す。
    """
    escaped = escape(text)
    added = _trailing_backslashes(escaped) - _trailing_backslashes(text)
    return escaped[: len(escaped) - added] if added > 0 else escaped


def balance_backslashes(markup: str) -> str:
    """末尾の "\\" が奇数個なら1つ足す。

    エスケープ済みテキストの直後にタグを連結するとき、末尾の "\\" が
    タグのエスケープとして解釈されないようにする。
    """
    if _trailing_backslashes(markup) % 2:
        return markup + "\\"
    return markup


class StyleSpec(BaseModel):
    """前景色・背景色・属性の組。タグとその閉じタグを生成する。"""

    foreground: str = ""
    background: str = ""
    attributes: frozenset[Attribute] = frozenset()

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("attributes", mode="before")
    @classmethod
    def _split_attributes(cls, value: object) -> object:
        """設定ファイルの "bold|underline" 形式を集合に変換する"""
        if isinstance(value, str):
            parts = (part.strip().lower() for part in value.split("|"))
            return frozenset(part for part in parts if part and part != "none")
        return value

    @property
    def style(self) -> str:
        """Richのスタイル文字列（例: "bold yellow on blue"、指定なしなら "none"）"""
        words = [_RICH_ATTRIBUTE_NAMES.get(a, a) for a in ATTRIBUTE_ORDER if a in self.attributes]
        if self.foreground:
            words.append(self.foreground)
        if self.background:
            words.append(f"on {self.background}")
        return " ".join(words) or NO_STYLE

    def tag(self) -> str:
        """開きタグ。何も指定されていなければ何も装飾しない [none]"""
        return f"[{self.style}]"

    def reset(self) -> str:
        """tag()で開いたスタイルだけを閉じるタグ

        暗黙の "[/]" ではなく同じスタイル名を明示して閉じるため、
        外側で開かれている別のスタイルを巻き込んで閉じることはない。
        """
        return f"[/{self.style}]"

    def wrap(self, markup: str) -> str:
        """エスケープ済みのマークアップをこのスタイルで囲む"""
        return f"{self.tag()}{balance_backslashes(markup)}{self.reset()}"


class MarkdownStyles(BaseModel):
    """mrkdwnレンダリングで使う役割ごとのスタイル（既定値はdefaultプリセット）"""

    user_mention: StyleSpec = StyleSpec(foreground="yellow", attributes=frozenset({"bold"}))
    channel_mention: StyleSpec = StyleSpec(foreground="cyan", attributes=frozenset({"bold"}))
    special_mention: StyleSpec = StyleSpec(foreground="yellow", attributes=frozenset({"bold", "underline"}))
    link: StyleSpec = StyleSpec(foreground="blue", attributes=frozenset({"underline"}))
    inline_code: StyleSpec = StyleSpec(foreground="bright_black")
    code_fence: StyleSpec = StyleSpec(foreground="bright_black")
    blockquote_mark: StyleSpec = StyleSpec(foreground="bright_black")
    blockquote_text: StyleSpec = StyleSpec(attributes=frozenset({"dim"}))

    model_config = {"extra": "forbid", "frozen": True}
