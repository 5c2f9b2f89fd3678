"""Shared type aliases for the push notification package."""

from __future__ import annotations

from typing import Any, Callable, Mapping

RawInput = Any
PushPayload = Mapping[str, Any]
OutboundMessage = dict[str, Any]
ValidationResult = dict[str, Any]
ProcessingResult = dict[str, Any]

SendPushFn = Callable[[OutboundMessage], str]
