"""Push request validation rules.

Mental model refresher:
- Domain modules hold the request rules.
- The validator decides whether an untyped request body is acceptable:
  - is it an object at all? (JSON arrays count as objects and then fail the
    target rule; null and scalars do not)
  - does it name exactly one target?
  - are the optional sections well-typed?
- It does not copy, trim, or rename anything. A valid body is handed on as-is.
- Checks run in a fixed order and the first failure wins.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from ..types import RawInput, ValidationResult

TARGET_FIELDS = ("token", "topic", "condition")
NOTIFICATION_FIELDS = ("title", "body", "imageUrl")

SHAPE_ERROR = "shape_error"
TARGET_SELECTION_ERROR = "target_selection_error"
TARGET_TYPE_ERROR = "target_type_error"
NOTIFICATION_SHAPE_ERROR = "notification_shape_error"
DATA_VALUE_TYPE_ERROR = "data_value_type_error"
EXTRA_OPTIONS_SHAPE_ERROR = "extra_options_shape_error"

EXACTLY_ONE_TARGET_MESSAGE = (
    'Exactly one target is required: provide a non-empty "token", "topic", '
    'or "condition" field.'
)

Check = Callable[[Mapping[str, Any]], "ValidationResult | None"]


def validate_push_request(raw: RawInput) -> ValidationResult:
    """Validate one raw request body and return a tagged result dictionary."""
    if not isinstance(raw, (Mapping, list)):
        return _failure(SHAPE_ERROR, "Request body must be a valid JSON object")

    fields = raw if isinstance(raw, Mapping) else {}
    for check in _CHECKS:
        failure = check(fields)
        if failure is not None:
            return failure

    return {"valid": True, "error": None, "error_kind": None, "payload": raw}


def provided_targets(payload: Mapping[str, Any]) -> list[str]:
    """Return target field names whose value is a non-blank string."""
    return [field for field in TARGET_FIELDS if _is_non_blank_str(payload.get(field))]


def _check_target_selection(payload: Mapping[str, Any]) -> ValidationResult | None:
    if len(provided_targets(payload)) != 1:
        return _failure(TARGET_SELECTION_ERROR, EXACTLY_ONE_TARGET_MESSAGE)
    return None


def _check_target_types(payload: Mapping[str, Any]) -> ValidationResult | None:
    for field in TARGET_FIELDS:
        if field in payload and not _is_non_blank_str(payload[field]):
            return _failure(TARGET_TYPE_ERROR, f'"{field}" must be a non-empty string.')
    return None


def _check_notification(payload: Mapping[str, Any]) -> ValidationResult | None:
    notification = payload.get("notification")
    if notification is None or isinstance(notification, list):
        return None
    if not isinstance(notification, Mapping):
        return _failure(NOTIFICATION_SHAPE_ERROR, '"notification" must be an object')

    for field in NOTIFICATION_FIELDS:
        if field in notification and not isinstance(notification[field], str):
            return _failure(
                NOTIFICATION_SHAPE_ERROR, f'"notification.{field}" must be a string'
            )
    return None


def _check_data(payload: Mapping[str, Any]) -> ValidationResult | None:
    if "data" not in payload:
        return None

    data = payload["data"]
    if not isinstance(data, Mapping):
        return _failure(
            DATA_VALUE_TYPE_ERROR, '"data" must be an object with string key-value pairs'
        )

    for key, value in data.items():
        if not isinstance(value, str):
            return _failure(
                DATA_VALUE_TYPE_ERROR,
                f'"data.{key}" must be a string. FCM data payload only accepts string values.',
            )
    return None


def _check_extra_options(payload: Mapping[str, Any]) -> ValidationResult | None:
    extra_options = payload.get("extraOptions")
    if extra_options is not None and not isinstance(extra_options, (Mapping, list)):
        return _failure(EXTRA_OPTIONS_SHAPE_ERROR, '"extraOptions" must be an object')
    return None


_CHECKS: tuple[Check, ...] = (
    _check_target_selection,
    _check_target_types,
    _check_notification,
    _check_data,
    _check_extra_options,
)


def _is_non_blank_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _failure(kind: str, error: str) -> ValidationResult:
    return {"valid": False, "error": error, "error_kind": kind, "payload": None}
