from __future__ import annotations

from .api import PrepareChannelRequest, RouteResponse
from .credentials import REQUIRED_FIELDS, ChatCredentials
from .envelope import ROUTING_CALLBACK, Envelope, EnvelopeEvent
from .inbound import ChannelArchived, InboundEvent, OtherEvent, PlainMessage, parse_inbound_event

__all__ = [
    "ChannelArchived",
    "ChatCredentials",
    "Envelope",
    "EnvelopeEvent",
    "InboundEvent",
    "OtherEvent",
    "PlainMessage",
    "PrepareChannelRequest",
    "REQUIRED_FIELDS",
    "ROUTING_CALLBACK",
    "RouteResponse",
    "parse_inbound_event",
]
