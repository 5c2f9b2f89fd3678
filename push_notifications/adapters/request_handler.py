"""HTTP request-handler adapter (framework-free).

Mental model refresher:
- This is the controller-like entrypoint for one HTTP request.
- The web framework decodes the body and calls this with the method and body.
- Flow:
  method check -> application use-case -> status code + JSON body
- This module owns the HTTP contract (status codes, response bodies), not the
  validation or assembly rules.
"""

from __future__ import annotations

from typing import Any

from ..application.process import process_push_request
from ..types import RawInput, SendPushFn

HandlerResponse = dict[str, Any]


def handle_push_request(
    method: str,
    body: RawInput,
    *,
    send_push: SendPushFn,
) -> HandlerResponse:
    """Handle one push request and return `{"status_code", "body"}`."""
    if method.upper() != "POST":
        return _response(405, {"success": False, "message": "Method not allowed. Use POST."})

    result = process_push_request(body, send_push)

    if result["status"] == "validation_failed":
        return _response(
            400,
            {"success": False, "message": "Validation failed", "error": result["error"]},
        )

    if result["status"] == "send_failed":
        return _response(
            500,
            {
                "success": False,
                "message": "Failed to send notification",
                "error": result["error"],
            },
        )

    return _response(
        200,
        {
            "success": True,
            "message": "Successfully sent message",
            "messageId": result["message_id"],
        },
    )


def _response(status_code: int, body: dict[str, Any]) -> HandlerResponse:
    return {"status_code": status_code, "body": body}
