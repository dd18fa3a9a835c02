"""
Session supervision for the single Slack connection.

State machine:
    ABSENT -> CONNECTING -> CONNECTED
    CONNECTING -> ABSENT   (credentials or handshake failed)
    CONNECTED  -> ABSENT   (disconnect / reset)

Callers that arrive while a connect is in flight wait for that attempt's
outcome instead of starting a second connection.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ...contracts.v1 import ChatCredentials
from ...kernel.errors import BridgeConnectionError, BridgeError
from .adapters.base import EVENT_MESSAGE, SIGNAL_OPENED, SIGNAL_UNABLE_TO_START, ChatConnection
from .credentials import CredentialProvider

logger = logging.getLogger("slackchat.session")

ConnectionFactory = Callable[[ChatCredentials], ChatConnection]
EventSink = Callable[[Dict[str, Any]], None]


class SessionState(str, Enum):
    ABSENT = "absent"
    CONNECTING = "connecting"
    CONNECTED = "connected"


@dataclass
class ChatSession:
    credentials: ChatCredentials
    connection: ChatConnection
    connected: bool = False
    _sink: Optional[EventSink] = field(default=None, repr=False)

    @property
    def bot_user_id(self) -> str:
        return self.credentials.bot_user_id

    @property
    def default_channel(self) -> str:
        return self.credentials.channel

    @property
    def directory(self) -> Any:
        return self.connection.directory


def default_connection_factory(credentials: ChatCredentials) -> ChatConnection:
    from .adapters.slack import SlackRtmConnection

    return SlackRtmConnection(credentials.bot_access_token)


class SessionSupervisor:
    """Owns the one persistent connection to Slack."""

    def __init__(
        self,
        on_event: EventSink,
        *,
        connection_factory: Optional[ConnectionFactory] = None,
        connect_timeout_s: Optional[float] = None,
    ):
        self._on_event = on_event
        self._connection_factory = connection_factory or default_connection_factory
        self.connect_timeout_s = connect_timeout_s

        self._lock = threading.Lock()
        self._session: Optional[ChatSession] = None
        self._pending: Optional["Future[ChatSession]"] = None
        # Bumped by disconnect(); a connect that started under an older
        # generation must not publish its session.
        self._generation = 0

    @property
    def state(self) -> SessionState:
        with self._lock:
            if self._session is not None:
                return SessionState.CONNECTED
            if self._pending is not None:
                return SessionState.CONNECTING
            return SessionState.ABSENT

    @property
    def session(self) -> Optional[ChatSession]:
        with self._lock:
            return self._session

    @property
    def directory(self) -> Any:
        session = self.session
        return session.directory if session is not None else None

    def ensure_connected(self, credential_provider: CredentialProvider) -> ChatSession:
        """Return the live session, creating and connecting one if needed.

        Raises the provider's config error or BridgeConnectionError; on failure
        no session is kept and the next call starts from scratch.
        """
        with self._lock:
            if self._session is not None:
                return self._session
            in_flight = self._pending
            if in_flight is None:
                pending: "Future[ChatSession]" = Future()
                self._pending = pending
                generation = self._generation

        if in_flight is not None:
            logger.debug("[ensure_connected] waiting for in-flight connect")
            return in_flight.result()
        return self._establish(credential_provider, pending, generation)

    def _establish(
        self,
        credential_provider: CredentialProvider,
        pending: "Future[ChatSession]",
        generation: int,
    ) -> ChatSession:
        """Fetch credentials and connect; the outcome also resolves `pending`."""
        logger.info("[ensure_connected] Creating Slack client.", extra={"state": SessionState.CONNECTING.value})
        session: Optional[ChatSession] = None
        try:
            credentials = credential_provider()
            session = ChatSession(credentials=credentials, connection=self._connection_factory(credentials))
            self.connect(session)
        except BaseException as e:
            if session is not None:
                self._release(session)
            with self._lock:
                if self._pending is pending:
                    self._pending = None
            if isinstance(e, BridgeError):
                logger.warning(f"[ensure_connected] {e.message}", extra={"code": e.code})
                pending.set_exception(e)
                raise
            if not isinstance(e, Exception):
                pending.set_exception(e)
                raise
            logger.exception("[ensure_connected] unexpected failure")
            err = BridgeConnectionError("Unable to connect to Slack.", details={"error": str(e)})
            pending.set_exception(err)
            raise err from e

        with self._lock:
            stale = generation != self._generation
            if self._pending is pending:
                self._pending = None
            if not stale:
                self._session = session

        if stale:
            self._release(session)
            err = BridgeConnectionError("Connection was reset while connecting.")
            logger.warning(f"[ensure_connected] {err.message}", extra={"code": err.code})
            pending.set_exception(err)
            raise err

        logger.info(
            f"[ensure_connected] Connected as bot user {session.bot_user_id}",
            extra={"state": SessionState.CONNECTED.value},
        )
        pending.set_result(session)
        return session

    def connect(self, session: ChatSession) -> None:
        """Start the session's connection and block until it opens.

        Both lifecycle signals are registered; whichever fires first removes
        the other, so a late signal never reaches a stale callback.
        """
        connection = session.connection
        outcome: "Future[None]" = Future()

        def on_opened(*_: Any) -> None:
            connection.remove_listener(SIGNAL_UNABLE_TO_START, on_failed)
            if not outcome.done():
                outcome.set_result(None)

        def on_failed(error: Any = None, *_: Any) -> None:
            connection.remove_listener(SIGNAL_OPENED, on_opened)
            if not outcome.done():
                details = {"error": str(error)} if error is not None else {}
                outcome.set_exception(BridgeConnectionError("Unable to connect to Slack.", details=details))

        sink = self._on_event
        session._sink = sink
        connection.on(EVENT_MESSAGE, sink)
        connection.once(SIGNAL_OPENED, on_opened)
        connection.once(SIGNAL_UNABLE_TO_START, on_failed)
        connection.start()

        try:
            outcome.result(timeout=self.connect_timeout_s)
        except FutureTimeoutError as e:
            connection.remove_listener(SIGNAL_OPENED, on_opened)
            connection.remove_listener(SIGNAL_UNABLE_TO_START, on_failed)
            raise BridgeConnectionError("Timed out connecting to Slack.") from e
        session.connected = True

    def _release(self, session: ChatSession) -> None:
        if session._sink is not None:
            session.connection.remove_listener(EVENT_MESSAGE, session._sink)
            session._sink = None
        session.connected = False
        try:
            session.connection.disconnect()
        except Exception:
            logger.exception("[disconnect] connection close failed")

    def disconnect(self) -> bool:
        """Drop the live session, if any. Returns True if one was closed.

        An in-flight connect is invalidated: it will close its own connection
        and fail instead of becoming the live session.
        """
        with self._lock:
            session = self._session
            self._session = None
            self._generation += 1
            # Callers arriving from now on start a fresh connect instead of
            # joining the invalidated one.
            self._pending = None
        if session is None:
            return False
        self._release(session)
        logger.info("[disconnect] Session closed", extra={"state": SessionState.ABSENT.value})
        return True
