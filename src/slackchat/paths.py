from __future__ import annotations

import os
from pathlib import Path


def slackchat_home() -> Path:
    env = os.environ.get("SLACKCHAT_HOME", "").strip()
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / ".slackchat").resolve()


def ensure_home() -> Path:
    home = slackchat_home()
    home.mkdir(parents=True, exist_ok=True)
    return home
