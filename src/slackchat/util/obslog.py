"""JSONL logging for the bridge.

Every record becomes one JSON object on stderr. Correlation keys passed via
`extra=` are copied into the object, and Slack tokens are masked wherever they
appear in the message or exception text.
"""
from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

CORRELATION_KEYS = ("op", "slack_channel", "content_channel", "code", "event_kind", "state")

# xoxb- (bot), xoxp- (user), xoxa-/xoxr-/xoxs- (app, refresh, session) tokens.
_SLACK_TOKEN_RE = re.compile(r"\b(xox[abprs])-[A-Za-z0-9-]+")

_configured_components: set = set()


def redact(text: str) -> str:
    return _SLACK_TOKEN_RE.sub(r"\1-***", text)


def parse_level(level: str, default: int = logging.INFO) -> int:
    name = str(level or "").strip().upper()
    if not name:
        return default
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else default


class JsonlFormatter(logging.Formatter):
    def __init__(self, *, component: str):
        super().__init__()
        self.component = str(component or "").strip() or "slackchat"

    def _timestamp(self, record: logging.LogRecord) -> str:
        created = float(getattr(record, "created", 0.0) or 0.0)
        return datetime.fromtimestamp(created, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": self._timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "component": self.component,
            "msg": redact(record.getMessage()),
        }
        payload.update(
            (key, str(value).strip())
            for key in CORRELATION_KEYS
            for value in [getattr(record, key, None)]
            if value is not None and str(value).strip()
        )
        if record.exc_info:
            payload["exc"] = redact(self.formatException(record.exc_info))

        try:
            return json.dumps(payload, ensure_ascii=False)
        except (TypeError, ValueError):
            return json.dumps({"component": self.component, "level": record.levelname, "msg": "(unserializable log record)"})


def _our_handler(root: logging.Logger) -> Optional[logging.Handler]:
    for handler in root.handlers:
        if isinstance(handler.formatter, JsonlFormatter):
            return handler
    return None


def setup_root_json_logging(
    *,
    component: str = "slackchat",
    level: str = "INFO",
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> None:
    """Install the JSONL handler on the root logger.

    Runs once per component unless `force` is set, which first removes every
    root handler (`slackchat serve` does this so uvicorn's reloader starts clean).
    """
    if component in _configured_components and not force:
        return
    _configured_components.add(component)

    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)

    lvl = parse_level(level)
    root.setLevel(lvl)

    handler = _our_handler(root)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(JsonlFormatter(component=component))
        root.addHandler(handler)
    handler.setLevel(lvl)
