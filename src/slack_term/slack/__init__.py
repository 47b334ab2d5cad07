"""Slack関連モジュール"""

from slack_term.slack.client import SlackClient, SlackMessage
from slack_term.slack.directory import Directories, load_directories, user_display_name
from slack_term.slack.exceptions import SlackAPIError, SlackError

__all__ = [
    "Directories",
    "SlackAPIError",
    "SlackClient",
    "SlackError",
    "SlackMessage",
    "load_directories",
    "user_display_name",
]
