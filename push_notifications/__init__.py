"""Push notification request validation, assembly, and delivery adapters."""

from .adapters import (
    build_fcm_sender_from_env,
    create_app,
    create_app_from_env,
    handle_push_request,
    send_push_via_console,
    sender_from_env,
)
from .application.process import process_push_request
from .domain.message import build_push_message
from .domain.validation import validate_push_request

__all__ = [
    "build_fcm_sender_from_env",
    "build_push_message",
    "create_app",
    "create_app_from_env",
    "handle_push_request",
    "process_push_request",
    "send_push_via_console",
    "sender_from_env",
    "validate_push_request",
]
