"""In-process content channels: per-channel tokens and websocket subscribers."""
from __future__ import annotations

import asyncio
import hmac
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

logger = logging.getLogger("slackchat.hub")

DEFAULT_QUEUE_SIZE = 256


@dataclass(eq=False)
class Subscription:
    channel: str
    loop: asyncio.AbstractEventLoop
    queue: "asyncio.Queue[Dict[str, Any]]"
    dropped: int = 0


@dataclass
class _ContentChannel:
    token: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)
    subscribers: Set[Subscription] = field(default_factory=set)


class ContentChannelHub:
    """
    Host side of the content channels.

    publish() may be called from any thread (the Slack connection delivers on
    its own); each message is handed to subscriber loops with
    call_soon_threadsafe. A subscriber whose queue is full misses the message.
    """

    def __init__(self, queue_size: int = DEFAULT_QUEUE_SIZE):
        self.queue_size = queue_size
        self._channels: Dict[str, _ContentChannel] = {}
        self._lock = threading.Lock()

    def set_content_token(self, channel: str, token: str, meta: Optional[Dict[str, Any]] = None) -> None:
        """Authorize `token` for subscribing to `channel`."""
        with self._lock:
            ch = self._channels.setdefault(str(channel), _ContentChannel())
            ch.token = str(token)
            ch.meta = dict(meta or {})

    def check_token(self, channel: str, token: str) -> bool:
        with self._lock:
            ch = self._channels.get(str(channel))
            expected = ch.token if ch is not None else ""
        if not expected or not token:
            return False
        return hmac.compare_digest(expected.encode("utf-8"), str(token).encode("utf-8"))

    def subscribe(self, channel: str, loop: Optional[asyncio.AbstractEventLoop] = None) -> Subscription:
        sub = Subscription(
            channel=str(channel),
            loop=loop or asyncio.get_running_loop(),
            queue=asyncio.Queue(maxsize=self.queue_size),
        )
        with self._lock:
            self._channels.setdefault(sub.channel, _ContentChannel()).subscribers.add(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            ch = self._channels.get(sub.channel)
            if ch is not None:
                ch.subscribers.discard(sub)

    def subscriber_count(self, channel: str) -> int:
        with self._lock:
            ch = self._channels.get(str(channel))
            return len(ch.subscribers) if ch is not None else 0

    def publish(self, channel: str, message: Dict[str, Any]) -> int:
        """Fan `message` out to the channel's subscribers. Returns how many were scheduled."""
        with self._lock:
            ch = self._channels.get(str(channel))
            targets: List[Subscription] = list(ch.subscribers) if ch is not None else []

        scheduled = 0
        for sub in targets:
            try:
                sub.loop.call_soon_threadsafe(_offer, sub, dict(message))
                scheduled += 1
            except RuntimeError:
                # Loop already closed; the websocket handler is gone.
                self.unsubscribe(sub)
        logger.debug(f"[publish] channel={channel} subscribers={scheduled}", extra={"content_channel": channel})
        return scheduled


def _offer(sub: Subscription, message: Dict[str, Any]) -> None:
    try:
        sub.queue.put_nowait(message)
    except asyncio.QueueFull:
        sub.dropped += 1
        logger.warning(f"[publish] subscriber queue full on {sub.channel}; message dropped", extra={"content_channel": sub.channel})
