from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from ..core.logging import logger
from ..services.latency import (
    DATABASE_DELAY,
    MEMORY_DELAY,
    SLOW_DELAY,
    simulate_latency,
)


router = APIRouter(default_response_class=PlainTextResponse)

PROXY_HEADER = "test-proxy-header"
NGINX_HEADER = "x-via-nginx"


@router.get("/")
async def index(request: Request):
    # An empty header value counts as not set
    proxy_header = request.headers.get(PROXY_HEADER) or "Not set"
    return f"Hello World - Proxy Header: {proxy_header} \n"


@router.get("/fast")
async def fast():
    return "Fast response \n"


@router.get("/slow")
async def slow():
    await simulate_latency(SLOW_DELAY)
    return "Slow response (after 1 second delay) \n"


@router.get("/database")
async def database():
    await simulate_latency(DATABASE_DELAY)
    return "Database response (20ms latency - HDD-like) \n"


@router.get("/memory")
async def memory():
    await simulate_latency(MEMORY_DELAY)
    return "Memory response (1ms latency - RAM-like) \n"


@router.get("/health")
async def health(request: Request):
    logger.debug(f"event=health_headers headers={dict(request.headers)}")

    # An empty header value counts as absent
    via_nginx = bool(request.headers.get(NGINX_HEADER))
    return f"OK - Via Nginx: {str(via_nginx).lower()} \n"
