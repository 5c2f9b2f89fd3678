"""FastAPI transport adapter.

Mental model refresher:
- This module is transport glue to HTTP itself.
- It decodes the request body, delegates to `handle_push_request`, and renders
  the returned status/body as JSON.
- CORS preflight is answered by middleware before the route runs.
- The sender is built once at startup and captured by the route; it is a
  blocking call, so it runs in the threadpool.
"""

from __future__ import annotations

import json
import logging
import time
from functools import partial
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..config import HttpSettings, load_http_settings
from ..logging_config import setup_logging
from ..types import SendPushFn
from .request_handler import handle_push_request
from .senders import sender_from_env

logger = logging.getLogger(__name__)

ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(send_push: SendPushFn, *, settings: HttpSettings | None = None) -> FastAPI:
    """Build the HTTP app around an already-configured push sender."""
    settings = settings or load_http_settings()
    app = FastAPI(title="Push Notification Gateway", version="0.1.0")

    allow_origins = list(settings.cors_origins) or ["*"]
    cors_options: dict[str, Any] = {"allow_methods": ["*"], "allow_headers": ["*"]}
    if "*" in allow_origins:
        # reflect the caller's origin
        cors_options["allow_origin_regex"] = ".*"
    else:
        cors_options["allow_origins"] = allow_origins
    app.add_middleware(CORSMiddleware, **cors_options)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "[HTTP ERROR] method=%s path=%s after=%ss",
                request.method,
                request.url.path,
                round(time.time() - start, 4),
            )
            raise
        logger.info(
            "[HTTP] method=%s path=%s status=%s duration=%ss",
            request.method,
            request.url.path,
            response.status_code,
            round(time.time() - start, 4),
        )
        return response

    @app.get("/health", tags=["misc"])
    async def health() -> dict[str, bool]:
        return {"ok": True}

    @app.api_route(settings.push_path, methods=ROUTE_METHODS, tags=["push"])
    async def send_notification(request: Request) -> JSONResponse:
        body = await _decode_json_body(request) if request.method == "POST" else None
        result = await run_in_threadpool(
            partial(handle_push_request, request.method, body, send_push=send_push)
        )
        return JSONResponse(status_code=result["status_code"], content=result["body"])

    return app


def create_app_from_env() -> FastAPI:
    """One-time startup: logging, settings, and sender selection."""
    setup_logging()
    settings = load_http_settings()
    send_push = sender_from_env()
    logger.info(
        "[APP START] push_path=%s cors_origins=%s",
        settings.push_path,
        ",".join(settings.cors_origins),
    )
    return create_app(send_push, settings=settings)


async def _decode_json_body(request: Request) -> Any:
    # None fails the object-shape check downstream
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError):
        return None
