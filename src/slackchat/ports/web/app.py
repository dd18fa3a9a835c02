from __future__ import annotations

import asyncio
import hmac
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError as BodyValidationError
from fastapi.responses import JSONResponse

from ... import __version__
from ...contracts.v1 import PrepareChannelRequest, RouteResponse
from ...kernel.errors import BridgeError, RequestValidationError
from ...kernel.settings import BridgeSettings, get_bridge_settings
from ..chat.credentials import provider_from_settings
from ..chat.manager import BridgeManager
from .hub import ContentChannelHub

logger = logging.getLogger("slackchat.web")

SERVICE_KEY_HEADER = "NodejsServiceKey"
MISSING_PARAMS_MESSAGE = "Required parameters are missing."


def _service_key_ok(request: Request, service_key: str) -> bool:
    if not service_key:
        return True
    provided = str(request.headers.get(SERVICE_KEY_HEADER) or "").strip()
    return hmac.compare_digest(provided.encode("utf-8"), service_key.encode("utf-8"))


def _error(err: BridgeError) -> Dict[str, Any]:
    return RouteResponse.failure(err.message).to_dict()


def build_router(manager: BridgeManager, hub: ContentChannelHub) -> APIRouter:
    """Authenticated bridge routes (mounted under base_auth_path)."""
    router = APIRouter()

    @router.post("/slack_chat/prepare_channel")
    def prepare_channel(body: PrepareChannelRequest) -> Dict[str, Any]:
        logger.debug("Route callback: prepare_channel")
        if not body.is_complete():
            err = RequestValidationError(MISSING_PARAMS_MESSAGE)
            logger.info(f"[prepare_channel] {err.message}", extra={"op": "prepare_channel", "code": err.code})
            return _error(err)

        try:
            manager.prepare_channel(body.slack_channel, body.channel)
        except BridgeError as e:
            logger.warning(
                f"[prepare_channel] Unable to connect to Slack: {e.message}",
                extra={"op": "prepare_channel", "code": e.code, "slack_channel": body.slack_channel},
            )
            return _error(e)

        hub.set_content_token(body.channel, body.token, body.model_dump())
        return RouteResponse.success().to_dict()

    @router.post("/slack_chat/reset")
    def reset() -> Dict[str, Any]:
        logger.debug("Route callback: reset")
        manager.reset()
        return RouteResponse.success().to_dict()

    @router.get("/slack_chat/status")
    def status() -> Dict[str, Any]:
        return RouteResponse.success(**manager.status()).to_dict()

    return router


def create_app(
    settings: Optional[BridgeSettings] = None,
    *,
    manager: Optional[BridgeManager] = None,
    hub: Optional[ContentChannelHub] = None,
) -> FastAPI:
    settings = settings or get_bridge_settings()
    hub = hub or ContentChannelHub()
    if manager is None:
        manager = BridgeManager(
            hub.publish,
            credential_provider=provider_from_settings(settings),
            connect_timeout_s=settings.connect_timeout_s,
        )

    app = FastAPI(title="slackchat", version=__version__)
    app.state.settings = settings
    app.state.manager = manager
    app.state.hub = hub

    base = settings.base_auth_path

    @app.middleware("http")
    async def _auth(request: Request, call_next):  # type: ignore[no-untyped-def]
        path = str(request.url.path or "")
        if path.startswith(base + "/slack_chat/") and not _service_key_ok(request, settings.service_key):
            logger.warning(f"[auth] invalid service key for {path}")
            return JSONResponse(status_code=401, content=RouteResponse.failure("Invalid service key.").to_dict())
        return await call_next(request)

    @app.exception_handler(BodyValidationError)
    async def _invalid_body(request: Request, exc: BodyValidationError):  # type: ignore[no-untyped-def]
        path = str(request.url.path or "")
        if not path.startswith(base + "/slack_chat/"):
            return await request_validation_exception_handler(request, exc)
        err = RequestValidationError(MISSING_PARAMS_MESSAGE)
        logger.info(
            f"[request] malformed body for {path}: {len(exc.errors())} error(s)",
            extra={"code": err.code},
        )
        return JSONResponse(content=_error(err))

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"status": "success", "version": __version__}

    app.include_router(build_router(manager, hub), prefix=base)

    @app.websocket("/content/{channel}")
    async def content_channel(websocket: WebSocket, channel: str) -> None:
        token = str(websocket.query_params.get("token") or "").strip()
        if not hub.check_token(channel, token):
            await websocket.close(code=4401)
            return

        await websocket.accept()
        sub = hub.subscribe(channel, asyncio.get_running_loop())

        async def _pump_out() -> None:
            while True:
                message = await sub.queue.get()
                await websocket.send_json(message)

        async def _pump_in() -> None:
            # Subscribers only listen; reading detects the disconnect.
            while True:
                await websocket.receive_text()

        out_task = asyncio.create_task(_pump_out())
        in_task = asyncio.create_task(_pump_in())
        try:
            done, pending = await asyncio.wait({out_task, in_task}, return_when=asyncio.FIRST_COMPLETED)
            for task in pending:
                task.cancel()
            for task in done:
                exc = task.exception()
                if exc is not None and not isinstance(exc, WebSocketDisconnect):
                    logger.warning(f"[content] subscriber on {channel} failed: {exc}", extra={"content_channel": channel})
        finally:
            hub.unsubscribe(sub)

    return app
