"""Adapter layer: HTTP transport and sender implementations."""

from .fake_senders import send_push_via_console
from .fcm_sender import build_fcm_sender_from_env
from .http_app import create_app, create_app_from_env
from .request_handler import handle_push_request
from .senders import sender_from_env

__all__ = [
    "build_fcm_sender_from_env",
    "create_app",
    "create_app_from_env",
    "handle_push_request",
    "send_push_via_console",
    "sender_from_env",
]
