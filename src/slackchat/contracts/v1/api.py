from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PrepareChannelRequest(BaseModel):
    """Body of POST /slack_chat/prepare_channel.

    `token` authorizes subscribers of `channel`; it is handed to the content
    hub, not checked here.
    """

    channel: str = ""
    token: str = ""
    slack_channel: str = ""

    model_config = ConfigDict(extra="allow")

    def is_complete(self) -> bool:
        return bool(self.channel.strip() and self.token.strip() and self.slack_channel.strip())


class RouteResponse(BaseModel):
    status: Literal["success", "error"]
    error: Optional[str] = None
    result: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def success(cls, **result: Any) -> "RouteResponse":
        return cls(status="success", result=result)

    @classmethod
    def failure(cls, message: str) -> "RouteResponse":
        return cls(status="error", error=message)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"status": self.status}
        if self.error is not None:
            d["error"] = self.error
        if self.result:
            d["result"] = self.result
        return d
