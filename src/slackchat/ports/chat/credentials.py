"""
Slack credentials from the host backend.

The host answers the `slackChat/getConfig` backend message with the workspace
token, the bot token, the bot's user id and a default channel.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from ...contracts.v1 import REQUIRED_FIELDS, ChatCredentials
from ...kernel.errors import ConfigIncompleteError, ConfigParseError, ConfigRetrievalError

logger = logging.getLogger("slackchat.credentials")

CredentialProvider = Callable[[], ChatCredentials]

GET_CONFIG_MESSAGE = {"messageType": "slackChat", "command": "getConfig"}


def parse_credentials(body: str) -> ChatCredentials:
    """Turn a getConfig response body into credentials.

    Raises ConfigParseError for a body that is not a JSON object and
    ConfigIncompleteError when a required field is missing or empty.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        logger.warning(f"[config] Failed to parse response: {e}", extra={"code": ConfigParseError.code})
        logger.debug(f"[config] Body: {str(body)[:300]}")
        raise ConfigParseError(f"Failed to parse Slack configuration: {e}") from e

    if not isinstance(data, dict):
        logger.warning("[config] Response is not a JSON object", extra={"code": ConfigParseError.code})
        raise ConfigParseError("Failed to parse Slack configuration: expected a JSON object.")

    missing = [k for k in REQUIRED_FIELDS if not data.get(k)]
    if missing:
        logger.warning(
            f"[config] Slack configuration not available (missing: {', '.join(missing)})",
            extra={"code": ConfigIncompleteError.code},
        )
        raise ConfigIncompleteError("Slack configuration not available.", details={"missing": missing})

    try:
        return ChatCredentials.model_validate({k: str(data[k]) for k in REQUIRED_FIELDS})
    except ValidationError as e:
        raise ConfigIncompleteError("Slack configuration not available.", details={"error": str(e)}) from e


class HostConfigProvider:
    """
    Fetch credentials by posting a backend message to the host.

    The request mirrors the host's backend message endpoint: a form body with
    `messageJson` (the JSON-encoded message) and `serviceKey`.
    """

    def __init__(self, backend_url: str, service_key: str = "", timeout_s: float = 30.0):
        self.backend_url = backend_url
        self.service_key = service_key
        self.timeout_s = timeout_s

    def _post(self, message: Dict[str, Any]) -> str:
        if not self.backend_url:
            raise ConfigRetrievalError("Backend URL is not configured.")

        data = urllib.parse.urlencode(
            {"messageJson": json.dumps(message, ensure_ascii=False), "serviceKey": self.service_key}
        ).encode("utf-8")
        req = urllib.request.Request(self.backend_url, data=data, method="POST")
        req.add_header("Content-Type", "application/x-www-form-urlencoded; charset=utf-8")
        req.add_header("Accept", "application/json")

        try:
            with urllib.request.urlopen(req, timeout=self.timeout_s) as resp:
                return resp.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            err_text = ""
            try:
                err_text = e.read().decode("utf-8", "ignore")[:300]
            except Exception:
                pass
            logger.warning(
                f"[config] Failed to retrieve Slack chat configuration: HTTP {e.code}",
                extra={"code": ConfigRetrievalError.code},
            )
            logger.debug(f"[config] Error body: {err_text}")
            raise ConfigRetrievalError(
                f"Failed to retrieve Slack configuration (HTTP {e.code}).", details={"http_status": e.code}
            ) from e
        except (urllib.error.URLError, OSError) as e:
            logger.warning(
                f"[config] Failed to retrieve Slack chat configuration: {e}",
                extra={"code": ConfigRetrievalError.code},
            )
            raise ConfigRetrievalError(f"Failed to retrieve Slack configuration: {e}") from e

    def __call__(self) -> ChatCredentials:
        body = self._post(dict(GET_CONFIG_MESSAGE))
        return parse_credentials(body)


def provider_from_settings(settings: Any) -> Optional[HostConfigProvider]:
    url = str(getattr(settings, "backend_url", "") or "").strip()
    if not url:
        return None
    return HostConfigProvider(
        url,
        service_key=str(getattr(settings, "service_key", "") or ""),
        timeout_s=float(getattr(settings, "backend_timeout_s", 30.0) or 30.0),
    )
