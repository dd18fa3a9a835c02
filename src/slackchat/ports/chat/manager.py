"""
Bridge manager: composition root for one Slack workspace.

Wires:
- SessionSupervisor (connection lifecycle)
- ChannelRegistry (Slack channel -> content channel)
- EventRouter (inbound events -> host publisher)
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from ...kernel.errors import ConfigRetrievalError
from ...kernel.registry import ChannelRegistry
from .credentials import CredentialProvider
from .router import EventRouter, Publisher
from .session import ConnectionFactory, SessionSupervisor

logger = logging.getLogger("slackchat.manager")


class BridgeManager:
    """Creates the Slack session on first use and bridges channels through it."""

    def __init__(
        self,
        publish: Publisher,
        *,
        credential_provider: Optional[CredentialProvider] = None,
        connection_factory: Optional[ConnectionFactory] = None,
        connect_timeout_s: Optional[float] = None,
    ):
        self.credential_provider = credential_provider
        self.registry = ChannelRegistry()
        self.supervisor = SessionSupervisor(
            self._dispatch,
            connection_factory=connection_factory,
            connect_timeout_s=connect_timeout_s,
        )
        self.router = EventRouter(self.registry, publish, directory=lambda: self.supervisor.directory)
        # Registration and reset never interleave.
        self._lock = threading.RLock()

    def _dispatch(self, raw: Dict[str, Any]) -> None:
        self.router.on_inbound_event(raw)

    def prepare_channel(
        self,
        slack_channel: str,
        content_channel: str,
        credential_provider: Optional[CredentialProvider] = None,
    ) -> None:
        """Make sure Slack is connected, then bridge `slack_channel` to `content_channel`.

        Raises the underlying BridgeError untouched when the session cannot be
        established.
        """
        provider = credential_provider or self.credential_provider
        if provider is None:
            raise ConfigRetrievalError("No Slack configuration source is configured.")

        self.supervisor.ensure_connected(provider)
        with self._lock:
            if self.supervisor.session is None:
                # reset() won the race after the connect finished.
                self.supervisor.ensure_connected(provider)
            self.registry.register(slack_channel, content_channel)
        logger.info(
            "[prepare_channel] channel registered",
            extra={"op": "prepare_channel", "slack_channel": slack_channel, "content_channel": content_channel},
        )

    def reset(self) -> None:
        """Disconnect and forget everything. Safe to call at any time."""
        with self._lock:
            closed = self.supervisor.disconnect()
            self.registry.clear()
        logger.info(f"[reset] bridge reset (session_closed={closed})", extra={"op": "reset"})

    def status(self) -> Dict[str, Any]:
        session = self.supervisor.session
        return {
            "state": self.supervisor.state.value,
            "bot_user_id": session.bot_user_id if session is not None else "",
            "default_channel": session.default_channel if session is not None else "",
            "channels": self.registry.count(),
        }
