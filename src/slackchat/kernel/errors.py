"""Error taxonomy for the chat bridge.

Every failure the route layer can surface is a `BridgeError` carrying a stable
`code`; the route layer turns it into `{"status": "error", "error": message}`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BridgeError(Exception):
    code = "bridge_error"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ConfigRetrievalError(BridgeError):
    """The host backend could not be reached or answered with a failure."""

    code = "config_retrieval_failed"


class ConfigParseError(BridgeError):
    """The host backend answered, but not with a JSON object."""

    code = "config_parse_failed"


class ConfigIncompleteError(BridgeError):
    """The configuration lacks one of the required Slack credentials."""

    code = "config_incomplete"


class BridgeConnectionError(BridgeError):
    """The real-time connection could not be started."""

    code = "connection_failed"


class RequestValidationError(BridgeError):
    code = "invalid_request"
