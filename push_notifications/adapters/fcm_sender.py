"""FCM HTTP v1 sender adapter.

Mental model refresher:
- This module is an outbound adapter.
- Credential loading happens once, in `build_fcm_sender_from_env`, and yields a
  plain `send_push(message) -> message_id` callable.
- Application code only sees that callable; it never touches credentials.

Wire notes:
- Messages are POSTed as `{"message": ...}` to
  `/v1/projects/<project>/messages:send`.
- `notification.imageUrl` is renamed to the wire field `image`.
- Platform sections are otherwise passed through, with these Admin SDK
  conversions:
  - `android.ttl` given as milliseconds becomes a duration string (`3500` -> `"3.500s"`)
  - `android.notification.imageUrl` and `apns.fcmOptions.imageUrl` become `image`
- Other Admin SDK conveniences are NOT converted. Examples are the
  `apns.payload.aps` camelCase keys and numeric `webpush` header values.
  Callers must send those in HTTP v1 form.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

from firebase_admin import credentials

from ..config import FcmSettings, load_fcm_settings
from ..types import OutboundMessage, SendPushFn

logger = logging.getLogger(__name__)


def build_fcm_sender_from_env() -> SendPushFn:
    """Load FCM credentials once and return a sender bound to them."""
    settings = load_fcm_settings()
    credential = _load_credential(settings.credentials_path)
    project_id = settings.project_id or getattr(credential, "project_id", None)
    if not project_id:
        raise RuntimeError(
            "Unable to determine Firebase project id: set FIREBASE_PROJECT_ID "
            "or use a service-account credential"
        )
    logger.info("[FCM] project_id=%s", project_id)

    def send_push(message: OutboundMessage) -> str:
        return send_push_via_fcm(
            message,
            credential=credential,
            project_id=project_id,
            settings=settings,
        )

    return send_push


def send_push_via_fcm(
    message: OutboundMessage,
    *,
    credential: Any,
    project_id: str,
    settings: FcmSettings,
) -> str:
    """Send one message via the FCM HTTP v1 REST API and return its name."""
    encoded_project = urllib.parse.quote(project_id, safe="")
    endpoint = f"{settings.base_url}/v1/projects/{encoded_project}/messages:send"
    body = json.dumps({"message": to_fcm_wire_message(message)}).encode("utf-8")
    access_token = credential.get_access_token().access_token

    request = urllib.request.Request(endpoint, data=body, method="POST")
    request.add_header("Authorization", f"Bearer {access_token}")
    request.add_header("Content-Type", "application/json; charset=UTF-8")

    try:
        with urllib.request.urlopen(request, timeout=settings.timeout_seconds) as response:
            status = int(response.getcode())
            if status < 200 or status >= 300:
                raise RuntimeError(f"FCM send failed with status {status}")
            parsed = json.loads(response.read().decode("utf-8") or "{}")
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace")
        raise RuntimeError(_fcm_error_message(exc.code, details)) from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"FCM send failed: {exc.reason}") from exc

    name = parsed.get("name") if isinstance(parsed, dict) else None
    if not isinstance(name, str) or not name:
        raise RuntimeError("FCM send succeeded but response did not include a message name")
    return name


def to_fcm_wire_message(message: OutboundMessage) -> dict[str, Any]:
    wire = dict(message)
    if isinstance(message.get("notification"), dict):
        wire["notification"] = _with_image_field(message["notification"])

    android = message.get("android")
    if isinstance(android, dict):
        wire_android = dict(android)
        ttl = android.get("ttl")
        if isinstance(ttl, (int, float)) and not isinstance(ttl, bool) and ttl >= 0:
            wire_android["ttl"] = _duration_from_millis(ttl)
        if isinstance(android.get("notification"), dict):
            wire_android["notification"] = _with_image_field(android["notification"])
        wire["android"] = wire_android

    apns = message.get("apns")
    if isinstance(apns, dict) and isinstance(apns.get("fcmOptions"), dict):
        wire["apns"] = dict(apns, fcmOptions=_with_image_field(apns["fcmOptions"]))

    return wire


def _with_image_field(section: dict[str, Any]) -> dict[str, Any]:
    if "imageUrl" not in section:
        return section
    converted = {key: value for key, value in section.items() if key != "imageUrl"}
    converted["image"] = section["imageUrl"]
    return converted


def _duration_from_millis(millis: float) -> str:
    seconds, remainder = divmod(int(millis), 1000)
    if remainder:
        return f"{seconds}.{remainder:03d}s"
    return f"{seconds}s"


def _load_credential(credentials_path: str | None) -> Any:
    if credentials_path:
        return credentials.Certificate(credentials_path)
    return credentials.ApplicationDefault()


def _fcm_error_message(code: int, details: str) -> str:
    try:
        parsed = json.loads(details)
    except ValueError:
        parsed = None
    if isinstance(parsed, dict):
        error = parsed.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return f"FCM send failed HTTP {code}: {details[:300]}"
