"""テーマ（スタイルのプリセット）"""

from pydantic import BaseModel

from slack_term.markdown.style import MarkdownStyles, StyleSpec

DEFAULT_PRESET = "default"


def _style(foreground: str = "", background: str = "", attributes: str = "") -> StyleSpec:
    return StyleSpec(foreground=foreground, background=background, attributes=attributes)


class MessageStyles(BaseModel):
    """メッセージ一覧のスタイル"""

    author: StyleSpec = _style("green", attributes="bold")
    timestamp: StyleSpec = _style("bright_black")

    model_config = {"extra": "forbid", "frozen": True}


class Theme(BaseModel):
    """解決済みのテーマ"""

    preset: str = DEFAULT_PRESET
    markdown: MarkdownStyles = MarkdownStyles()
    messages: MessageStyles = MessageStyles()

    model_config = {"extra": "forbid", "frozen": True}


def _markdown_styles(user: str, channel: str, link: str, code: str, quote: str) -> MarkdownStyles:
    # プリセットはいずれも同じ属性構成で色だけが異なる
    return MarkdownStyles(
        user_mention=_style(user, attributes="bold"),
        channel_mention=_style(channel, attributes="bold"),
        special_mention=_style(user, attributes="bold|underline"),
        link=_style(link, attributes="underline"),
        inline_code=_style(code),
        code_fence=_style(code),
        blockquote_mark=_style(quote),
        blockquote_text=_style(attributes="dim"),
    )


BUILTIN_THEMES: dict[str, Theme] = {
    "default": Theme(),
    "dark": Theme(
        preset="dark",
        markdown=_markdown_styles("#d7af5f", "#5fafd7", "#5f87ff", "#8a8a8a", "#585858"),
        messages=MessageStyles(author=_style("#5faf5f", attributes="bold"), timestamp=_style("#585858")),
    ),
    "light": Theme(
        preset="light",
        markdown=_markdown_styles("#af8700", "#0087af", "#005faf", "#585858", "#a8a8a8"),
        messages=MessageStyles(author=_style("#008700", attributes="bold"), timestamp=_style("#a8a8a8")),
    ),
    "monokai": Theme(
        preset="monokai",
        markdown=_markdown_styles("#e6db74", "#66d9ef", "#66d9ef", "#75715e", "#75715e"),
        messages=MessageStyles(author=_style("#a6e22e", attributes="bold"), timestamp=_style("#75715e")),
    ),
    "solarized_dark": Theme(
        preset="solarized_dark",
        markdown=_markdown_styles("#b58900", "#2aa198", "#268bd2", "#586e75", "#586e75"),
        messages=MessageStyles(author=_style("#859900", attributes="bold"), timestamp=_style("#586e75")),
    ),
    "solarized_light": Theme(
        preset="solarized_light",
        markdown=_markdown_styles("#b58900", "#2aa198", "#268bd2", "#93a1a1", "#93a1a1"),
        messages=MessageStyles(author=_style("#859900", attributes="bold"), timestamp=_style("#93a1a1")),
    ),
}


def builtin_theme(name: str) -> Theme:
    """プリセット名に対応するテーマを返す。未知の名前は default にフォールバックする"""
    return BUILTIN_THEMES.get(name, BUILTIN_THEMES[DEFAULT_PRESET])


class MarkdownStyleOverrides(BaseModel):
    """設定ファイルで上書きするmrkdwnスタイル（未指定はプリセットのまま）"""

    user_mention: StyleSpec | None = None
    channel_mention: StyleSpec | None = None
    special_mention: StyleSpec | None = None
    link: StyleSpec | None = None
    inline_code: StyleSpec | None = None
    code_fence: StyleSpec | None = None
    blockquote_mark: StyleSpec | None = None
    blockquote_text: StyleSpec | None = None

    model_config = {"extra": "forbid"}


class MessageStyleOverrides(BaseModel):
    """設定ファイルで上書きするメッセージ一覧スタイル"""

    author: StyleSpec | None = None
    timestamp: StyleSpec | None = None

    model_config = {"extra": "forbid"}


class ThemeConfig(BaseModel):
    """config.yaml の theme セクション"""

    preset: str = DEFAULT_PRESET
    markdown_style: MarkdownStyleOverrides = MarkdownStyleOverrides()
    messages: MessageStyleOverrides = MessageStyleOverrides()

    model_config = {"extra": "forbid"}


def _specified(overrides: BaseModel) -> dict[str, StyleSpec]:
    return {name: value for name, value in overrides if value is not None}


def resolve_theme(config: ThemeConfig) -> Theme:
    """プリセットをベースに、設定ファイルで指定された項目だけを上書きする"""
    base = builtin_theme(config.preset)
    return Theme(
        preset=config.preset,
        markdown=base.markdown.model_copy(update=_specified(config.markdown_style)),
        messages=base.messages.model_copy(update=_specified(config.messages)),
    )
