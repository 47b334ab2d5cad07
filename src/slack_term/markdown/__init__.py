"""Slack mrkdwnレンダリングモジュール"""

from slack_term.markdown.emoji import emoji_entries, lookup_emoji
from slack_term.markdown.renderer import render
from slack_term.markdown.style import MarkdownStyles, StyleSpec, escape_markup

__all__ = [
    "MarkdownStyles",
    "StyleSpec",
    "emoji_entries",
    "escape_markup",
    "lookup_emoji",
    "render",
]
