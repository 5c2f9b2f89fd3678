#!/usr/bin/env python3
"""Run one push request through validation and assembly with the console sender."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from push_notifications import process_push_request, send_push_via_console  # noqa: E402
from push_notifications.logging_config import setup_logging  # noqa: E402


def main() -> int:
    setup_logging()
    args = parse_args()
    payload = load_payload(args.payload_file)
    result = process_push_request(payload, send_push_via_console)

    print("")
    print("[SUMMARY]")
    print(f"status={result['status']}")
    print(f"message_id={result['message_id']}")
    print(f"error={result['error']} error_kind={result['error_kind']}")
    if result["message"] is not None:
        print(f"message={json.dumps(result['message'], indent=2)}")
    return 0 if result["success"] else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate, assemble and console-send one push request."
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file with a push request body.",
    )
    return parser.parse_args()


def load_payload(payload_file: Path | None) -> Any:
    if payload_file is None:
        return sample_payload()
    with payload_file.open("r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


def sample_payload() -> dict[str, Any]:
    return {
        "token": "  demo-device-token  ",
        "notification": {
            "title": "Demo title",
            "body": "Demo body",
            "imageUrl": "https://example.com/banner.png",
        },
        "data": {"screen": "inbox", "badge": "3"},
        "extraOptions": {
            "android": {"priority": "high", "ttl": "3600s"},
        },
    }


if __name__ == "__main__":
    sys.exit(main())
