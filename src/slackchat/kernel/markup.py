"""
Slack markup to display text.

Two passes, each a single left-to-right scan into a fresh buffer:
- references: <#C...> becomes #channel-name, <@U...> becomes @Real Name
- emoji: :short_code: becomes its unicode glyph

Anything that cannot be resolved is copied through untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Mapping, Optional, Protocol

from .emoji import lookup as lookup_emoji

logger = logging.getLogger("slackchat.markup")

_REFERENCE_RE = re.compile(r"<[^>]+>")
_EMOJI_RE = re.compile(r":[\w+-]+:")

CHANNEL_PREFIX = "#C"
USER_PREFIX = "@U"


class EntityDirectory(Protocol):
    """Read-only user/channel lookup owned by the connection client."""

    def lookup_user(self, user_id: str) -> Optional[Mapping[str, Any]]: ...

    def lookup_channel(self, channel_id: str) -> Optional[Mapping[str, Any]]: ...


def display_name(user: Optional[Mapping[str, Any]]) -> str:
    """Preferred name for a user record: real name, else handle, else ""."""
    if not user:
        return ""
    return str(user.get("real_name") or user.get("name") or "")


def _safe_lookup(fn: Callable[[str], Optional[Mapping[str, Any]]], entity_id: str) -> Optional[Mapping[str, Any]]:
    try:
        return fn(entity_id)
    except Exception:
        logger.debug(f"[markup] lookup failed for {entity_id}", exc_info=True)
        return None


def _resolve_reference(token: str, directory: EntityDirectory) -> Optional[str]:
    kind = token[1:3]
    entity_id = token[2:-1]
    if kind == CHANNEL_PREFIX:
        channel = _safe_lookup(directory.lookup_channel, entity_id)
        name = str((channel or {}).get("name") or "")
        return f"#{name}" if name else None
    if kind == USER_PREFIX:
        name = display_name(_safe_lookup(directory.lookup_user, entity_id))
        return f"@{name}" if name else None
    return None


def _scan(text: str, pattern: "re.Pattern[str]", replace: Callable[[str], Optional[str]]) -> str:
    out = []
    pos = 0
    for m in pattern.finditer(text):
        token = m.group(0)
        out.append(text[pos : m.start()])
        out.append(replace(token) or token)
        pos = m.end()
    if pos == 0:
        return text
    out.append(text[pos:])
    return "".join(out)


def replace_references(text: str, directory: EntityDirectory) -> str:
    return _scan(text, _REFERENCE_RE, lambda token: _resolve_reference(token, directory))


def replace_emoji(text: str) -> str:
    return _scan(text, _EMOJI_RE, lambda token: lookup_emoji(token[1:-1]))


def translate(text: str, directory: EntityDirectory) -> str:
    """Translate raw Slack markup into display text. Never raises."""
    if not text:
        return text or ""
    return replace_emoji(replace_references(text, directory))
