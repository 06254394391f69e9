#!/usr/bin/env python
"""
Run the DonorHub API server.

Usage:
    python run_api.py
    python run_api.py --reload            # Development mode
    python run_api.py --log-level debug

Requires JWT_SECRET, SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY in the
environment or in .env; startup fails without them.
"""

import argparse
import sys

import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run DonorHub API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level for the server and application loggers",
    )
    args = parser.parse_args()

    settings = get_settings()
    if not settings.jwt_secret:
        print("JWT_SECRET is not defined in environment variables", file=sys.stderr)
        sys.exit(1)

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=args.log_level or settings.log_level,
    )


if __name__ == "__main__":
    main()
