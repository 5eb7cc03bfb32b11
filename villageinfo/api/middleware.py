"""Request logging middleware (pure ASGI)."""

from __future__ import annotations

import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from villageinfo.services.metrics import metrics
from villageinfo.services.request_context import (
    generate_request_id,
    location_from_scope,
    request_id_var,
)

logger = logging.getLogger("villageinfo.access")

_REQUEST_ID_HEADER = b"x-request-id"


class RequestLoggingMiddleware:
    """Tag each request with an ID and log ``method path status latency``,
    followed by the ``[state/district/block/village]`` the request was for.

    Honours an incoming ``X-Request-ID``; otherwise generates one. Both
    ``X-Request-ID`` and ``X-Response-Time-Ms`` are added to the response.
    Of a request body only the location fields the route tagged are logged.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers", [])).get(_REQUEST_ID_HEADER, b"")
        rid = incoming.decode("latin-1") or generate_request_id()
        token = request_id_var.set(rid)

        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
                headers = list(message.get("headers", []))
                headers.append((b"x-response-time-ms", str(elapsed_ms).encode()))
                headers.append((_REQUEST_ID_HEADER, rid.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
            location = location_from_scope(scope)
            logger.info(
                "%s %s %s %.2fms%s",
                scope.get("method", ""),
                scope.get("path", ""),
                status_code,
                elapsed_ms,
                f" [{location}]" if location else "",
                extra={"status_code": status_code, "location": location or None},
            )
            metrics.inc_request(status_code)
            metrics.record_latency(elapsed_ms)
            request_id_var.reset(token)
