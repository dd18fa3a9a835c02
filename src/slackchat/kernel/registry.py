from __future__ import annotations

import threading
from typing import Dict, Optional


def _key(slack_channel_id: str) -> str:
    return str(slack_channel_id or "").strip()


class ChannelRegistry:
    """Slack channel id -> content channel id.

    Lookups always go by Slack channel id; two Slack channels feeding the same
    content channel is not prevented.
    """

    def __init__(self) -> None:
        self._channels: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, slack_channel_id: str, content_channel: str) -> None:
        """Map a Slack channel to a content channel, replacing any prior mapping."""
        with self._lock:
            self._channels[_key(slack_channel_id)] = str(content_channel)

    def resolve(self, slack_channel_id: str) -> Optional[str]:
        with self._lock:
            return self._channels.get(_key(slack_channel_id))

    def remove(self, slack_channel_id: str) -> bool:
        """Forget a Slack channel. Returns True if it was registered."""
        with self._lock:
            return self._channels.pop(_key(slack_channel_id), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._channels.clear()

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._channels)

    def count(self) -> int:
        with self._lock:
            return len(self._channels)
