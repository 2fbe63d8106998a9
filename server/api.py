"""
server/api.py
=============
FastAPI application exposing the live simulation to the browser renderer.

Routes
------
``GET /Cars``
    Current :class:`~sim.traffic.Traffic` snapshot as ``text/json``.
``GET /<path>``
    Static asset from the static root (Starlette ``StaticFiles``);
    directories serve ``index.html``, anything missing is ``404``.
``HEAD|OPTIONS|POST|PUT|PATCH|DELETE /<path>``
    Fixed plain-text reply.

The app starts the :class:`~sim.sim_bridge.SimBridge` on startup and
stops it on shutdown unless ``manage_bridge`` is *False*.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from config import FALLBACK_REPLY, SNAPSHOT_PATH, STATIC_ROOT
from sim.sim_bridge import SimBridge
from .schemas import TrafficSnapshot

log = logging.getLogger("server")

# Every method except GET gets the fixed reply.
_FALLBACK_METHODS = ["HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"]


def create_app(
    bridge: SimBridge,
    static_root: str = STATIC_ROOT,
    manage_bridge: bool = True,
) -> FastAPI:
    """Build the HTTP application around *bridge*.

    Parameters
    ----------
    bridge : SimBridge
        Source of snapshots.
    static_root : str
        Directory served for every GET other than the snapshot path.
    manage_bridge : bool
        Start / stop the bridge with the application lifespan.
    """
    if not os.path.isdir(static_root):
        log.warning("Static root %s does not exist, asset requests will fail", static_root)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if manage_bridge:
            bridge.start()
        try:
            yield
        finally:
            if manage_bridge:
                bridge.stop()

    # Docs routes would shadow static assets of the same name.
    app = FastAPI(
        title="Traffic Simulation Server",
        description="Serves the live road-traffic simulation to the renderer.",
        version="1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        if request.url.path != SNAPSHOT_PATH:
            log.info("%s %s -> %d", request.method, request.url.path,
                     response.status_code)
        return response

    # Registered before the snapshot route so HEAD /Cars lands here too.
    @app.api_route("/{any_path:path}", methods=_FALLBACK_METHODS)
    def fallback(any_path: str) -> PlainTextResponse:
        return PlainTextResponse(FALLBACK_REPLY)

    @app.get(SNAPSHOT_PATH)
    def get_snapshot() -> Response:
        """Full traffic state, read atomically between ticks."""
        snapshot = TrafficSnapshot.model_validate(bridge.snapshot())
        return Response(content=snapshot.model_dump_json(), media_type="text/json")

    # Mounted last: routes above take precedence over the catch-all mount.
    app.mount(
        "/",
        StaticFiles(directory=static_root, html=True, check_dir=False),
        name="static",
    )

    return app
