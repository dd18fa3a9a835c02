"""
Slack adapter for the chat bridge.

Uses:
- Bot Token (xoxb-): RTM connection for inbound events (slack_sdk.rtm_v2)
- The same token for Web API lookups (users.info, conversations.info)

The RTM handshake runs on a daemon thread; its outcome is reported through
the `opened` / `unable_to_start` signals of ChatConnection.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Mapping, Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from slack_sdk.rtm_v2 import RTMClient

from .base import EVENT_MESSAGE, SIGNAL_OPENED, SIGNAL_UNABLE_TO_START, ChatConnection

logger = logging.getLogger("slackchat.slack")

# Slack's own system user; never bridged.
SLACKBOT_USER_ID = "USLACKBOT"


class SlackDirectory:
    """
    Users and channels by id, fetched on demand via the Web API and cached for
    the lifetime of the session.
    """

    def __init__(self, web_client: Any):
        self._web_client = web_client
        self._users: Dict[str, Dict[str, Any]] = {}
        self._channels: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def lookup_user(self, user_id: str) -> Optional[Mapping[str, Any]]:
        uid = str(user_id or "").strip()
        if not uid:
            return None
        with self._lock:
            cached = self._users.get(uid)
        if cached is not None:
            return cached

        try:
            resp = self._web_client.users_info(user=uid)
        except SlackApiError as e:
            logger.debug(f"[directory] users.info {uid}: {e.response.get('error', e)}")
            return None

        user = resp.get("user") or {}
        if not isinstance(user, dict) or not user:
            return None
        profile = user.get("profile") or {}
        record = {
            "id": uid,
            "name": str(user.get("name") or ""),
            "real_name": str(user.get("real_name") or profile.get("real_name") or ""),
        }
        with self._lock:
            self._users[uid] = record
        return record

    def lookup_channel(self, channel_id: str) -> Optional[Mapping[str, Any]]:
        cid = str(channel_id or "").strip()
        if not cid:
            return None
        with self._lock:
            cached = self._channels.get(cid)
        if cached is not None:
            return cached

        try:
            resp = self._web_client.conversations_info(channel=cid)
        except SlackApiError as e:
            logger.debug(f"[directory] conversations.info {cid}: {e.response.get('error', e)}")
            return None

        channel = resp.get("channel") or {}
        if not isinstance(channel, dict) or not channel.get("name"):
            return None
        record = {"id": cid, "name": str(channel["name"])}
        with self._lock:
            self._channels[cid] = record
        return record

    def forget_user(self, user_id: str) -> None:
        with self._lock:
            self._users.pop(str(user_id), None)

    def forget_channel(self, channel_id: str) -> None:
        with self._lock:
            self._channels.pop(str(channel_id), None)


class SlackRtmConnection(ChatConnection):
    """
    RTM connection for one bot token.
    """

    platform = "slack"

    def __init__(
        self,
        bot_token: str,
        *,
        web_client: Any = None,
        rtm_factory: Optional[Callable[..., Any]] = None,
    ):
        super().__init__()
        self.bot_token = bot_token
        self._web_client = web_client or WebClient(token=bot_token)
        self._rtm_factory = rtm_factory or RTMClient
        self._rtm: Any = None
        self._directory = SlackDirectory(self._web_client)
        self._thread: Optional[threading.Thread] = None
        self._closed = threading.Event()

    @property
    def directory(self) -> SlackDirectory:
        return self._directory

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._closed.clear()
        self._thread = threading.Thread(target=self._run_connect, name="slackchat-rtm-connect", daemon=True)
        self._thread.start()

    def _run_connect(self) -> None:
        try:
            rtm = self._rtm_factory(token=self.bot_token, web_client=self._web_client)
            rtm.on(EVENT_MESSAGE)(self._on_rtm_message)
            # Keep the directory fresh when names change mid-session.
            rtm.on("user_change")(self._on_user_change)
            rtm.on("channel_rename")(self._on_channel_rename)
            self._rtm = rtm
            rtm.connect()
        except Exception as e:
            logger.warning(f"[connect] RTM start failed: {e}")
            self._close_rtm()
            self.emit(SIGNAL_UNABLE_TO_START, e)
            return

        if self._closed.is_set():
            # disconnect() raced the handshake; do not report a dead session as open.
            self._close_rtm()
            self.emit(SIGNAL_UNABLE_TO_START, RuntimeError("connection closed during start"))
            return

        logger.info("[connect] RTM connection opened")
        self.emit(SIGNAL_OPENED)

    def _on_rtm_message(self, client: Any, event: Dict[str, Any]) -> None:
        self.emit(EVENT_MESSAGE, event)

    def _on_user_change(self, client: Any, event: Dict[str, Any]) -> None:
        user = event.get("user") or {}
        if isinstance(user, dict) and user.get("id"):
            self._directory.forget_user(str(user["id"]))

    def _on_channel_rename(self, client: Any, event: Dict[str, Any]) -> None:
        channel = event.get("channel") or {}
        if isinstance(channel, dict) and channel.get("id"):
            self._directory.forget_channel(str(channel["id"]))

    def _close_rtm(self) -> None:
        rtm = self._rtm
        self._rtm = None
        if rtm is None:
            return
        try:
            rtm.close()
        except Exception as e:
            logger.debug(f"[disconnect] RTM close: {e}")

    def disconnect(self) -> None:
        self._closed.set()
        self._close_rtm()
        logger.info("[disconnect] Disconnected")
