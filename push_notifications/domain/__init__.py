"""Domain layer: request validation and message assembly rules."""

from .message import build_push_message
from .validation import validate_push_request

__all__ = [
    "build_push_message",
    "validate_push_request",
]
