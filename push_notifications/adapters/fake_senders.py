"""Fake sender adapter for local smoke tests.

Mental model refresher:
- This is outbound adapter code.
- In production, the FCM adapter lives next door in `fcm_sender.py`.
- Application code calls senders through an injected function; it does not know
  which provider implementation is underneath.
"""

from __future__ import annotations

import json
import logging
import uuid

from ..types import OutboundMessage

logger = logging.getLogger(__name__)


def send_push_via_console(message: OutboundMessage) -> str:
    message_id = f"console/{uuid.uuid4().hex}"
    logger.info("[PUSH] message_id=%s message=%s", message_id, json.dumps(message, sort_keys=True))
    return message_id
