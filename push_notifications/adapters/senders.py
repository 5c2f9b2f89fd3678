"""Sender selection from environment-variable config."""

from __future__ import annotations

import os

from ..types import SendPushFn
from .fake_senders import send_push_via_console
from .fcm_sender import build_fcm_sender_from_env

SENDER_CHOICES = ("fcm", "console")


def sender_from_env() -> SendPushFn:
    """Return the push sender named by `PUSH_SENDER` (default: fcm)."""
    choice = os.getenv("PUSH_SENDER", "fcm").strip().lower()
    if choice == "console":
        return send_push_via_console
    if choice == "fcm":
        return build_fcm_sender_from_env()
    raise RuntimeError(
        f"Invalid PUSH_SENDER value {choice!r}; expected one of {', '.join(SENDER_CHOICES)}"
    )
