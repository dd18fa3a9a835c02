"""
Base class for real-time chat connections.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional

logger = logging.getLogger("slackchat.connection")

# Event stream carrying raw wire payloads (dicts).
EVENT_MESSAGE = "message"
# Lifecycle signals; exactly one of the two fires per start().
SIGNAL_OPENED = "opened"
SIGNAL_UNABLE_TO_START = "unable_to_start"

Listener = Callable[..., Any]


class _Registration:
    __slots__ = ("fn", "once")

    def __init__(self, fn: Listener, once: bool):
        self.fn = fn
        self.once = once


class ChatConnection(ABC):
    """
    Abstract real-time connection to a chat backend.

    Each connection:
    - emits `message` with every inbound wire payload
    - emits `opened` or `unable_to_start` once per start()
    - owns the entity directory used to resolve user/channel names
    """

    platform: str = "unknown"

    def __init__(self) -> None:
        self._listeners: Dict[str, List[_Registration]] = {}
        self._listeners_lock = threading.Lock()

    @property
    @abstractmethod
    def directory(self) -> Any:
        """Entity directory (lookup_user / lookup_channel)."""
        pass

    @abstractmethod
    def start(self) -> None:
        """
        Begin connecting. Must not block on the handshake; the outcome is
        reported through `opened` / `unable_to_start`.
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection. Safe to call more than once."""
        pass

    def on(self, event: str, fn: Listener) -> None:
        with self._listeners_lock:
            self._listeners.setdefault(event, []).append(_Registration(fn, once=False))

    def once(self, event: str, fn: Listener) -> None:
        with self._listeners_lock:
            self._listeners.setdefault(event, []).append(_Registration(fn, once=True))

    def remove_listener(self, event: str, fn: Listener) -> bool:
        """Drop the first registration of `fn` for `event`. Returns True if found."""
        with self._listeners_lock:
            regs = self._listeners.get(event) or []
            for i, reg in enumerate(regs):
                if reg.fn is fn:
                    del regs[i]
                    return True
        return False

    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        with self._listeners_lock:
            if event is None:
                self._listeners.clear()
            else:
                self._listeners.pop(event, None)

    def listener_count(self, event: str) -> int:
        with self._listeners_lock:
            return len(self._listeners.get(event) or [])

    def emit(self, event: str, *args: Any) -> int:
        """Call every listener for `event`. Returns how many were called."""
        with self._listeners_lock:
            regs = list(self._listeners.get(event) or [])
            if any(r.once for r in regs):
                self._listeners[event] = [r for r in self._listeners.get(event, []) if not r.once]

        for reg in regs:
            try:
                reg.fn(*args)
            except Exception:
                logger.exception(f"[emit] listener for {event} failed", extra={"event_kind": event})
        return len(regs)


class NullDirectory:
    """Directory that knows nobody. Used when no session is live."""

    def lookup_user(self, user_id: str) -> Optional[Mapping[str, Any]]:
        return None

    def lookup_channel(self, channel_id: str) -> Optional[Mapping[str, Any]]:
        return None
