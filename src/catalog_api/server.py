"""Run the catalog HTTP app with uvicorn: ``catalog-api`` or ``python -m catalog_api.server``."""

from __future__ import annotations

import os

import uvicorn

from catalog_api.config import get_settings

DEFAULT_PORT = 3000


def listen_port() -> int:
    """PORT from the environment. Only the HTTP server needs it, so Lambda never parses it."""
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise SystemExit(f"PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise SystemExit(f"PORT must be between 1 and 65535, got {port}")
    return port


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "catalog_api.app:app",
        host="0.0.0.0",
        port=listen_port(),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
