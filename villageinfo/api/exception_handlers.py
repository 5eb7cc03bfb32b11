"""Exception handlers that render every failure as ``{"error": "<message>"}``."""

from __future__ import annotations

import logging
import traceback

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from villageinfo.errors import VillageInfoError

logger = logging.getLogger("villageinfo.errors")


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


async def village_info_error_handler(
    request: Request, exc: VillageInfoError
) -> JSONResponse:
    """Map the domain taxonomy onto HTTP status codes."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "%s on %s %s: %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc.detail,
    )
    return _error(exc.status_code, exc.detail)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes, wrong methods and any explicit HTTPException."""
    return _error(exc.status_code, str(exc.detail), headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies are client errors (400), same as missing fields."""
    logger.warning(
        "Invalid request body on %s %s: %s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return _error(400, "Invalid request body")


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Log the traceback, return a generic 500 with nothing leaked."""
    logger.error(
        "Unhandled exception on %s %s:\n%s",
        request.method,
        request.url.path,
        traceback.format_exc(),
    )
    return _error(500, "Internal server error")
