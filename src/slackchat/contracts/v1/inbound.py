"""
Inbound Slack events, parsed once at the connection boundary.

The router only ever sees one of three variants:
- PlainMessage: a user-typed message (type=message, no subtype)
- ChannelArchived: type=message, subtype=channel_archive
- OtherEvent: everything else, ignored downstream
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


SUBTYPE_CHANNEL_ARCHIVE = "channel_archive"


class _SlackEvent(BaseModel):
    channel: str = ""
    user: str = ""
    bot_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def from_bot(self) -> bool:
        return bool(self.bot_id)


class PlainMessage(_SlackEvent):
    kind: Literal["plain"] = "plain"
    text: str = ""


class ChannelArchived(_SlackEvent):
    kind: Literal["archived"] = "archived"


class OtherEvent(_SlackEvent):
    kind: Literal["other"] = "other"
    type: str = ""
    subtype: str = ""


InboundEvent = Union[PlainMessage, ChannelArchived, OtherEvent]


def _s(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_inbound_event(raw: Any) -> InboundEvent:
    """Classify a raw RTM payload. Never raises; junk becomes OtherEvent."""
    if not isinstance(raw, dict):
        return OtherEvent()

    etype = _s(raw.get("type"))
    subtype = _s(raw.get("subtype"))
    common = {
        "channel": _s(raw.get("channel")),
        "user": _s(raw.get("user")),
        "bot_id": _s(raw.get("bot_id")) or None,
    }

    if etype != "message":
        return OtherEvent(type=etype, subtype=subtype, **common)
    if not subtype:
        return PlainMessage(text=_s(raw.get("text")), **common)
    if subtype == SUBTYPE_CHANNEL_ARCHIVE:
        return ChannelArchived(**common)
    return OtherEvent(type=etype, subtype=subtype, **common)
