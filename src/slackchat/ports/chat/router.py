"""
Inbound event routing: Slack event -> envelope -> content channel.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ...contracts.v1 import ChannelArchived, Envelope, InboundEvent, PlainMessage, parse_inbound_event
from ...kernel.markup import EntityDirectory, display_name, translate
from ...kernel.registry import ChannelRegistry
from .adapters.base import NullDirectory
from .adapters.slack import SLACKBOT_USER_ID

logger = logging.getLogger("slackchat.router")

ANONYMOUS_USER = "Anonymous"

# Host sink: (content_channel, envelope dict) -> None
Publisher = Callable[[str, Dict[str, Any]], None]
DirectorySource = Callable[[], Optional[EntityDirectory]]


class EventRouter:
    """
    Filters inbound events and publishes envelopes for registered channels.

    Never raises: anything it cannot route is dropped.
    """

    def __init__(
        self,
        registry: ChannelRegistry,
        publish: Publisher,
        directory: Optional[DirectorySource] = None,
    ):
        self.registry = registry
        self.publish = publish
        self._directory = directory or (lambda: None)

    def _current_directory(self) -> EntityDirectory:
        try:
            d = self._directory()
        except Exception:
            d = None
        return d if d is not None else NullDirectory()

    def accepts(self, event: InboundEvent) -> Optional[str]:
        """Content channel for an event that should be forwarded, else None."""
        if not isinstance(event, (PlainMessage, ChannelArchived)):
            return None
        if event.from_bot or event.user == SLACKBOT_USER_ID:
            return None
        return self.registry.resolve(event.channel)

    def on_inbound_event(self, raw: Any) -> Optional[Envelope]:
        """Handle one wire payload. Returns the envelope published, if any."""
        try:
            event = parse_inbound_event(raw)
            logger.debug(f"[inbound] {event.kind} channel={event.channel} user={event.user}")

            content_channel = self.accepts(event)
            if content_channel is None:
                return None

            if isinstance(event, PlainMessage):
                envelope = self._message_envelope(event, content_channel)
            else:
                envelope = Envelope.ended(content_channel)
                self.registry.remove(event.channel)
                logger.info(
                    "[inbound] Slack channel archived; mapping removed",
                    extra={"slack_channel": event.channel, "content_channel": content_channel},
                )
        except Exception:
            logger.exception("[inbound] failed to handle event")
            return None

        self._hand_off(content_channel, envelope)
        return envelope

    def _message_envelope(self, event: PlainMessage, content_channel: str) -> Envelope:
        directory = self._current_directory()
        try:
            user = directory.lookup_user(event.user) if event.user else None
        except Exception:
            user = None
        username = display_name(user) or ANONYMOUS_USER
        return Envelope.message(content_channel, user=username, text=translate(event.text, directory))

    def _hand_off(self, content_channel: str, envelope: Envelope) -> None:
        try:
            self.publish(content_channel, envelope.to_message())
        except Exception:
            logger.exception(
                "[publish] content channel publish failed",
                extra={"content_channel": content_channel, "event_kind": envelope.event},
            )
