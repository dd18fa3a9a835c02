from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict


ROUTING_CALLBACK = "slackChatHandler"

EnvelopeEvent = Literal["message", "ended"]


class Envelope(BaseModel):
    """Normalized message published to a content channel.

    Field names are fixed by the client-side handler (`slackChatHandler`).
    """

    callback: Literal["slackChatHandler"] = ROUTING_CALLBACK
    channel: str
    event: EnvelopeEvent
    text: Optional[str] = None
    user: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def message(cls, channel: str, *, user: str, text: str) -> "Envelope":
        return cls(channel=channel, event="message", user=user, text=text)

    @classmethod
    def ended(cls, channel: str) -> "Envelope":
        return cls(channel=channel, event="ended")

    def to_message(self) -> Dict[str, Any]:
        """Wire form: unset text/user are left out."""
        return self.model_dump(exclude_none=True)
