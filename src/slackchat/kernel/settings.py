"""Bridge settings.

Settings live in ~/.slackchat/settings.yaml (or $SLACKCHAT_HOME/settings.yaml):
- backend_url / service_key: where and how to reach the host backend
- base_auth_path: prefix for the authenticated routes
- host / port / log_level: server options
- connect_timeout_s / backend_timeout_s: network limits

Environment variables (SLACKCHAT_<KEY>) override the file.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml  # type: ignore
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..paths import ensure_home
from ..util.fs import atomic_write_text


class BridgeSettings(BaseModel):
    backend_url: str = ""
    service_key: str = ""
    base_auth_path: str = "/nodejs"
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "INFO"
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)
    backend_timeout_s: float = Field(default=30.0, gt=0)

    model_config = ConfigDict(extra="ignore")

    def masked(self) -> Dict[str, Any]:
        """Settings as a dict with the service key hidden."""
        d = self.model_dump()
        if d.get("service_key"):
            d["service_key"] = "***"
        return d


ENV_PREFIX = "SLACKCHAT_"


def _settings_path() -> Path:
    return ensure_home() / "settings.yaml"


def load_settings() -> Dict[str, Any]:
    """Load raw settings from settings.yaml."""
    p = _settings_path()
    if not p.exists():
        return {}
    try:
        doc = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        return doc if isinstance(doc, dict) else {}
    except Exception:
        return {}


def save_settings(settings: Dict[str, Any]) -> None:
    """Save raw settings to settings.yaml."""
    p = _settings_path()
    # The file carries the service key.
    atomic_write_text(p, yaml.safe_dump(settings, allow_unicode=True, sort_keys=False), mode=0o600)


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in BridgeSettings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None:
            continue
        raw = raw.strip()
        if name == "connect_timeout_s" and raw.lower() in ("", "none", "null", "0"):
            out[name] = None
            continue
        if raw:
            out[name] = raw
    return out


def build_settings(doc: Optional[Dict[str, Any]] = None, environ: Optional[Mapping[str, str]] = None) -> BridgeSettings:
    """Merge file values and env overrides over the defaults.

    A value that fails validation falls back to its default, field by field,
    so one bad entry does not disable the whole file.
    """
    merged: Dict[str, Any] = {}
    merged.update({k: v for k, v in (doc or {}).items() if k in BridgeSettings.model_fields})
    merged.update(_env_overrides(os.environ if environ is None else environ))

    accepted: Dict[str, Any] = {}
    for key, value in merged.items():
        try:
            BridgeSettings.model_validate({key: value})
        except ValidationError:
            continue
        accepted[key] = value

    settings = BridgeSettings.model_validate(accepted)
    settings.base_auth_path = _normalize_base_path(settings.base_auth_path)
    settings.backend_url = settings.backend_url.strip()
    return settings


def _normalize_base_path(path: str) -> str:
    p = "/" + str(path or "").strip().strip("/")
    return "" if p == "/" else p


def get_bridge_settings() -> BridgeSettings:
    """Effective settings: defaults < settings.yaml < environment."""
    return build_settings(load_settings())
