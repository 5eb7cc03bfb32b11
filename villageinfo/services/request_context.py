"""Per-request correlation: a request ID for log records and the location
the request is about, for the access log."""

from __future__ import annotations

import uuid
from contextvars import ContextVar

from starlette.requests import Request
from starlette.types import Scope

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_LOCATION_KEY = "location"


def generate_request_id() -> str:
    """Return a new 32-character hex request ID."""
    return uuid.uuid4().hex


def get_request_id() -> str:
    return request_id_var.get()


def tag_location(request: Request, *parts: str | None) -> None:
    """Record ``state/district/block/village`` for a body-addressed request."""
    setattr(
        request.state,
        _LOCATION_KEY,
        "/".join(p.strip() for p in parts if p and p.strip()),
    )


def location_from_scope(scope: Scope) -> str:
    """Location tagged by the route, else the path parameters joined by ``/``.

    Starlette keeps ``request.state`` and ``path_params`` in the scope dict
    shared with outer middleware, so this is readable after the app returns.
    """
    tagged = (scope.get("state") or {}).get(_LOCATION_KEY)
    if tagged:
        return tagged
    return "/".join(str(v) for v in (scope.get("path_params") or {}).values())
