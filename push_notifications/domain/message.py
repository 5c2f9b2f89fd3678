"""Outbound FCM message assembly.

Mental model refresher:
- This module turns an already-validated payload into the message handed to a
  sender. It assumes validation passed and therefore cannot fail.
- Field policy:
  - the single provided target is attached first, trimmed
  - `notification` keeps only truthy title/body/imageUrl; the section itself is
    attached whenever the request carried a non-null value, even if it ends up
    empty (an array yields `{}`)
  - `data` is attached verbatim only when non-empty
  - `extraOptions.android|webpush|apns` are lifted to top-level sections when
    set to a JSON-truthy value: null, false, 0 and "" are skipped, empty
    objects and arrays are kept
"""

from __future__ import annotations

from typing import Any, Mapping

from ..types import OutboundMessage, PushPayload
from .validation import NOTIFICATION_FIELDS, provided_targets

PLATFORM_SECTIONS = ("android", "webpush", "apns")


def build_push_message(payload: PushPayload) -> OutboundMessage:
    """Assemble the outbound message for one validated payload."""
    target_field = provided_targets(payload)[0]
    message: OutboundMessage = {target_field: payload[target_field].strip()}

    notification = payload.get("notification")
    if notification is not None:
        message["notification"] = _notification_section(notification)

    data = payload.get("data")
    if data:
        message["data"] = data

    extra_options = payload.get("extraOptions")
    if isinstance(extra_options, Mapping):
        for section in PLATFORM_SECTIONS:
            if _json_truthy(extra_options.get(section)):
                message[section] = extra_options[section]

    return message


def _notification_section(notification: Mapping[str, Any] | list) -> dict[str, str]:
    if not isinstance(notification, Mapping):
        return {}
    return {
        field: notification[field] for field in NOTIFICATION_FIELDS if notification.get(field)
    }


def _json_truthy(value: Any) -> bool:
    if value is None or isinstance(value, (str, int, float)):
        # value != value only for NaN
        return bool(value) and value == value
    return True
