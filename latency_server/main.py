import time
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.datastructures import URL, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .core.settings import PORT
from .core.logging import logger
from .api.routes import router
from .core.context import request_id_var


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server running on port {PORT}")
    logger.info(f"- Fast endpoint: http://localhost:{PORT}/fast")
    logger.info(f"- Slow endpoint: http://localhost:{PORT}/slow")
    yield


def request_label(scope: Scope, rid: str) -> str:
    url = URL(scope=scope)
    target = url.path
    if url.query:
        target = f"{target}?{url.query}"
    return f"Request {rid} - {scope['method']} {target}"


class RequestTimingMiddleware:
    """Times each HTTP request from entry until its last body chunk is sent.

    The request id stays bound for the whole exchange, so the server's
    access log line (emitted on ``http.response.start``) carries it too.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        rid = uuid.uuid4().hex
        token = request_id_var.set(rid)
        label = request_label(scope, rid)
        status = -1
        finished = False
        start = time.perf_counter()

        def log_end() -> None:
            dur_ms = (time.perf_counter() - start) * 1000
            logger.info(
                f"event=request_end label={label!r} status={status} duration_ms={dur_ms:.3f}"
            )

        async def send_with_timing(message: Message) -> None:
            nonlocal status, finished
            if message["type"] == "http.response.start":
                status = message["status"]
                MutableHeaders(scope=message).append("X-Request-ID", rid)

            await send(message)

            if message["type"] == "http.response.body" and not message.get("more_body", False):
                finished = True
                log_end()

        logger.info(f"event=request_start label={label!r}")
        try:
            await self.app(scope, receive, send_with_timing)
        finally:
            # No complete response went out (error or disconnect)
            if not finished:
                log_end()
            request_id_var.reset(token)


app = FastAPI(title="Latency Test Server", lifespan=lifespan)
app.include_router(router)
app.add_middleware(RequestTimingMiddleware)
