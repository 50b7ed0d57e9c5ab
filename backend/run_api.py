#!/usr/bin/env python
"""
Start the Streambox API under uvicorn.

Host, port, reload and log level default to the values in Settings
(environment or .env); command-line flags override them.

Usage:
    python run_api.py
    python run_api.py --reload --port 8000
"""

import argparse
import uvicorn

from shared.config import get_settings


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the Streambox API server")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default {settings.port})")
    parser.add_argument("--reload", action="store_true", default=settings.reload, help="Restart on code changes")
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
    )
    args = parser.parse_args()

    uvicorn.run(
        "api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
