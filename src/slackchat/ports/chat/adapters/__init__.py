"""
Chat platform connections.

Each connection wraps one real-time client:
- Slack: RTM (slack_sdk.rtm_v2) + Web API lookups
"""

from .base import EVENT_MESSAGE, SIGNAL_OPENED, SIGNAL_UNABLE_TO_START, ChatConnection, NullDirectory
from .slack import SLACKBOT_USER_ID, SlackDirectory, SlackRtmConnection

__all__ = [
    "ChatConnection",
    "EVENT_MESSAGE",
    "NullDirectory",
    "SIGNAL_OPENED",
    "SIGNAL_UNABLE_TO_START",
    "SLACKBOT_USER_ID",
    "SlackDirectory",
    "SlackRtmConnection",
]
