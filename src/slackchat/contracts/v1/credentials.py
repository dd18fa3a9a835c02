from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


REQUIRED_FIELDS = ("access_token", "bot_access_token", "bot_user_id", "channel")


class ChatCredentials(BaseModel):
    """Slack access info handed out by the host backend's getConfig command."""

    access_token: str = Field(min_length=1)
    bot_access_token: str = Field(min_length=1)
    bot_user_id: str = Field(min_length=1)
    channel: str = Field(min_length=1)

    model_config = ConfigDict(extra="ignore", frozen=True)
