"""Application orchestration for one push request.

Mental model refresher:
- Application layer coordinates use-case flow across domain modules.
- In this project it:
  1) validates the raw request body
  2) assembles the outbound message
  3) calls the injected sender exactly once
  4) folds the outcome into a single result dictionary
- It never retries and never touches credentials; the sender is a plain
  callable built once at startup.
"""

from __future__ import annotations

import logging

from ..domain.message import build_push_message
from ..domain.validation import validate_push_request
from ..types import OutboundMessage, ProcessingResult, RawInput, SendPushFn

logger = logging.getLogger(__name__)


def process_push_request(raw: RawInput, send_push: SendPushFn) -> ProcessingResult:
    """Execute the push use-case for one raw request body."""
    validation = validate_push_request(raw)
    if not validation["valid"]:
        logger.info(
            "[VALIDATION FAILED] kind=%s error=%s",
            validation["error_kind"],
            validation["error"],
        )
        return _result(
            "validation_failed",
            error=validation["error"],
            error_kind=validation["error_kind"],
        )

    message = build_push_message(validation["payload"])

    try:
        message_id = send_push(message)
    except Exception as exc:
        error = str(exc) or "Unknown error"
        logger.exception("[SEND FAILED] error=%s", error)
        return _result("send_failed", message=message, error=error, error_kind="send_error")

    logger.info("[SENT] message_id=%s", message_id)
    return _result("sent", message=message, message_id=message_id)


def _result(
    status: str,
    *,
    message: OutboundMessage | None = None,
    message_id: str | None = None,
    error: str | None = None,
    error_kind: str | None = None,
) -> ProcessingResult:
    return {
        "status": status,
        "success": status == "sent",
        "message": message,
        "message_id": message_id,
        "error": error,
        "error_kind": error_kind,
    }
