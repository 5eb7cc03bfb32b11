"""Entry point for ``python -m villageinfo``."""

from __future__ import annotations

import argparse

import uvicorn

from villageinfo.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Village Info API server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind address (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Listening port (default: {settings.port}, env PORT)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (development only)",
    )
    args = parser.parse_args()
    uvicorn.run(
        "villageinfo.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
