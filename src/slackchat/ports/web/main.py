from __future__ import annotations

import argparse
from typing import Optional

import uvicorn

from ...kernel.settings import get_bridge_settings
from ...util.obslog import setup_root_json_logging


def main(argv: Optional[list[str]] = None) -> int:
    settings = get_bridge_settings()

    parser = argparse.ArgumentParser(prog="slackchat serve", description="Slack chat bridge (FastAPI)")
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Enable autoreload (dev)")
    parser.add_argument("--log-level", default=settings.log_level, help=f"Log level (default: {settings.log_level})")
    args = parser.parse_args(argv)

    setup_root_json_logging(component="slackchat", level=str(args.log_level), force=True)

    try:
        uvicorn.run(
            "slackchat.ports.web.app:create_app",
            factory=True,
            host=str(args.host),
            port=int(args.port),
            log_level=str(args.log_level).lower(),
            log_config=None,
            reload=bool(args.reload),
        )
    except (KeyboardInterrupt, SystemExit):
        pass

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
