"""Development entrypoint for the Frontline client bridge."""

from __future__ import annotations

import argparse

import uvicorn

from frontline.api.app import app
from frontline.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the Frontline client bridge")
    parser.add_argument("--host", default=settings.host, help="Host interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="TCP port to listen on")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload (dev mode)",
    )
    args = parser.parse_args()

    if args.reload:
        uvicorn.run(
            "frontline.api.app:app",
            host=args.host,
            port=args.port,
            reload=True,
            factory=False,
        )
    else:
        uvicorn.run(app, host=args.host, port=args.port, reload=False, factory=False)


if __name__ == "__main__":
    main()
