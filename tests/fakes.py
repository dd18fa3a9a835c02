from __future__ import annotations

import threading
from typing import Any, Dict, List, Mapping, Optional

from slackchat.contracts.v1 import ChatCredentials
from slackchat.kernel.errors import ConfigRetrievalError
from slackchat.ports.chat.adapters.base import SIGNAL_OPENED, SIGNAL_UNABLE_TO_START, ChatConnection


CREDS = ChatCredentials(
    access_token="xoxp-workspace",
    bot_access_token="xoxb-bot",
    bot_user_id="UBOT",
    channel="CDEFAULT",
)


class FakeDirectory:
    def __init__(
        self,
        users: Optional[Dict[str, Dict[str, Any]]] = None,
        channels: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        self.users = dict(users or {})
        self.channels = dict(channels or {})

    def lookup_user(self, user_id: str) -> Optional[Mapping[str, Any]]:
        return self.users.get(user_id)

    def lookup_channel(self, channel_id: str) -> Optional[Mapping[str, Any]]:
        return self.channels.get(channel_id)


class FakeConnection(ChatConnection):
    """Connection whose start() outcome is scripted: open, fail or hang."""

    platform = "fake"

    def __init__(self, outcome: str = "open", directory: Optional[FakeDirectory] = None):
        super().__init__()
        self.outcome = outcome
        self._directory = directory or FakeDirectory()
        self.started = 0
        self.disconnected = 0
        self.release = threading.Event()

    @property
    def directory(self) -> FakeDirectory:
        return self._directory

    def start(self) -> None:
        self.started += 1
        if self.outcome == "open":
            self.emit(SIGNAL_OPENED)
        elif self.outcome == "fail":
            self.emit(SIGNAL_UNABLE_TO_START, RuntimeError("invalid_auth"))
        elif self.outcome == "delayed":
            def _later() -> None:
                self.release.wait(5)
                self.emit(SIGNAL_OPENED)

            threading.Thread(target=_later, daemon=True).start()

    def disconnect(self) -> None:
        self.disconnected += 1


class ConnectionFactory:
    """Records every connection it builds."""

    def __init__(self, outcome: str = "open", directory: Optional[FakeDirectory] = None):
        self.outcome = outcome
        self.directory = directory
        self.built: List[FakeConnection] = []

    def __call__(self, credentials: ChatCredentials) -> FakeConnection:
        conn = FakeConnection(self.outcome, directory=self.directory)
        self.built.append(conn)
        return conn


class ScriptedProvider:
    """Credential provider that raises the queued errors first, then succeeds."""

    def __init__(self, *errors: Exception):
        self.errors = list(errors)
        self.calls = 0

    def __call__(self) -> ChatCredentials:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return CREDS


class Sink:
    def __init__(self) -> None:
        self.published: List[tuple] = []

    def __call__(self, channel: str, message: Dict[str, Any]) -> None:
        self.published.append((channel, message))


def failing_provider() -> ChatCredentials:
    raise ConfigRetrievalError("Failed to retrieve Slack configuration: boom")
