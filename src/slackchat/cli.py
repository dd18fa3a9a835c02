from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from pydantic import ValidationError

from . import __version__
from .kernel.errors import BridgeError
from .kernel.settings import BridgeSettings, build_settings, get_bridge_settings, load_settings, save_settings


def _print_json(obj: Any) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def cmd_serve(args: argparse.Namespace) -> int:
    from .ports.web.main import main as web_main

    argv = []
    if args.host:
        argv += ["--host", str(args.host)]
    if args.port:
        argv += ["--port", str(args.port)]
    if args.log_level:
        argv += ["--log-level", str(args.log_level)]
    if args.reload:
        argv.append("--reload")
    return web_main(argv)


def cmd_config_show(_: argparse.Namespace) -> int:
    _print_json(get_bridge_settings().masked())
    return 0


def cmd_config_set(args: argparse.Namespace) -> int:
    key = str(args.key or "").strip()
    if key not in BridgeSettings.model_fields:
        print(f"error: unknown setting: {key}", file=sys.stderr)
        return 2

    try:
        BridgeSettings.model_validate({key: args.value})
    except ValidationError:
        print(f"error: invalid value for {key}: {args.value}", file=sys.stderr)
        return 2

    doc = load_settings()
    doc[key] = args.value
    save_settings(doc)
    _print_json(build_settings(doc, environ={}).masked())
    return 0


def cmd_check(_: argparse.Namespace) -> int:
    """Fetch credentials from the host backend once and report the outcome."""
    from .ports.chat.credentials import provider_from_settings

    provider = provider_from_settings(get_bridge_settings())
    if provider is None:
        _print_json({"status": "error", "error": "backend_url is not configured"})
        return 1
    try:
        creds = provider()
    except BridgeError as e:
        _print_json({"status": "error", "error": e.message, "code": e.code})
        return 1
    _print_json({"status": "success", "result": {"bot_user_id": creds.bot_user_id, "channel": creds.channel}})
    return 0


def cmd_version(_: argparse.Namespace) -> int:
    print(__version__)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slackchat", description="Slack chat bridge for host content channels")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_serve = sub.add_parser("serve", help="Run the bridge HTTP server")
    p_serve.add_argument("--host", default="", help="Bind host (default: from settings)")
    p_serve.add_argument("--port", type=int, default=0, help="Bind port (default: from settings)")
    p_serve.add_argument("--log-level", default="", help="Log level (default: from settings)")
    p_serve.add_argument("--reload", action="store_true", help="Enable autoreload (dev)")
    p_serve.set_defaults(func=cmd_serve)

    p_config = sub.add_parser("config", help="Show or change settings")
    config_sub = p_config.add_subparsers(dest="action", required=True)

    p_config_show = config_sub.add_parser("show", help="Print effective settings (secrets masked)")
    p_config_show.set_defaults(func=cmd_config_show)

    p_config_set = config_sub.add_parser("set", help="Write one setting to settings.yaml")
    p_config_set.add_argument("key", help="Setting name")
    p_config_set.add_argument("value", help="Setting value")
    p_config_set.set_defaults(func=cmd_config_set)

    p_check = sub.add_parser("check", help="Fetch Slack credentials from the host backend once")
    p_check.set_defaults(func=cmd_check)

    p_ver = sub.add_parser("version", help="Show version")
    p_ver.set_defaults(func=cmd_version)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
