#!/usr/bin/env python3
"""Run the push notification HTTP server with uvicorn."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import uvicorn  # noqa: E402

from push_notifications.adapters.http_app import create_app_from_env  # noqa: E402
from push_notifications.config import load_env_file, load_http_settings  # noqa: E402


def main() -> int:
    args = parse_args()
    load_env_file(REPO_ROOT / ".env")
    settings = load_http_settings()
    app = create_app_from_env()
    uvicorn.run(
        app,
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_config=None,
    )
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the push notification endpoint.")
    parser.add_argument("--host", default=None, help="Bind host (defaults to HTTP_HOST).")
    parser.add_argument("--port", type=int, default=None, help="Bind port (defaults to HTTP_PORT).")
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
