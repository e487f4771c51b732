"""Validates record payloads against the hub's wire schemas."""

from typing import Any

from suprsend_sdk.records.exceptions import InputValueError

_RESERVED_EVENT_NAMES = frozenset(
    {
        "$identify",
        "$notification_delivered",
        "$notification_dismiss",
        "$notification_clicked",
        "$app_launched",
        "$user_login",
        "$user_logout",
    }
)
_RESERVED_PREFIXES = ("$", "ss_")


def validate_track_event_schema(data: dict[str, Any]) -> dict[str, Any]:
    """Validate an event payload built by ``Event.get_final_json``.

    Raises:
        InputValueError: on any validation failure.
    """
    _require_non_empty_string(data, "event", "event")
    _require_non_empty_string(data, "distinct_id", "event")
    _require_non_empty_string(data, "env", "event")
    if not isinstance(data.get("properties"), dict):
        raise InputValueError("[event] 'properties' must be an object")
    return data


def validate_workflow_body_schema(data: dict[str, Any]) -> dict[str, Any]:
    """Validate a legacy workflow body.

    Raises:
        InputValueError: on any validation failure.
    """
    for field in ("name", "template", "notification_category"):
        _require_non_empty_string(data, field, "workflow")
    users = data.get("users")
    if not isinstance(users, list) or not users:
        raise InputValueError("[workflow] 'users' must be a non-empty list")
    for i, user in enumerate(users):
        if not isinstance(user, dict):
            raise InputValueError(f"[workflow] user at index {i} must be an object")
        _require_non_empty_string(user, "distinct_id", f"workflow.users[{i}]")
    _require_optional_object(data, "data", "workflow")
    return data


def validate_workflow_trigger_body_schema(data: dict[str, Any]) -> dict[str, Any]:
    """Validate a workflow trigger request body.

    Raises:
        InputValueError: on any validation failure.
    """
    _require_non_empty_string(data, "workflow", "workflow_trigger")
    recipients = data.get("recipients")
    if not isinstance(recipients, list) or not recipients:
        raise InputValueError("[workflow_trigger] 'recipients' must be a non-empty list")
    for i, recipient in enumerate(recipients):
        _validate_recipient(recipient, i)
    _require_optional_object(data, "data", "workflow_trigger")
    return data


def validate_event_name(event_name: Any) -> str:
    """Return the trimmed event name or raise if it is unusable."""
    if not isinstance(event_name, str):
        raise InputValueError("event_name must be a string")
    event_name = event_name.strip()
    if not event_name:
        raise InputValueError("event_name missing")
    if event_name not in _RESERVED_EVENT_NAMES and event_name.lower().startswith(
        _RESERVED_PREFIXES
    ):
        raise InputValueError("event_names starting with [$,ss_] are reserved")
    return event_name


def validate_distinct_id(distinct_id: Any) -> str:
    """Return the trimmed distinct_id or raise if it is missing."""
    if not isinstance(distinct_id, str):
        raise InputValueError(
            "distinct_id must be a string. an Id which uniquely identify a user in your app"
        )
    distinct_id = distinct_id.strip()
    if not distinct_id:
        raise InputValueError("distinct_id missing")
    return distinct_id


def _validate_recipient(raw: Any, index: int) -> None:
    if isinstance(raw, str):
        if not raw.strip():
            raise InputValueError(
                f"[workflow_trigger] recipient at index {index} must be a non-empty string"
            )
        return
    if not isinstance(raw, dict):
        raise InputValueError(
            f"[workflow_trigger] recipient at index {index} must be a string or an object"
        )
    if not raw.get("distinct_id") and not raw.get("is_transient"):
        raise InputValueError(
            f"[workflow_trigger] recipient at index {index}: 'distinct_id' is required"
        )


def _require_non_empty_string(data: dict[str, Any], field: str, context: str) -> None:
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise InputValueError(f"[{context}] '{field}' must be a non-empty string")


def _require_optional_object(data: dict[str, Any], field: str, context: str) -> None:
    if field in data and not isinstance(data[field], dict):
        raise InputValueError(f"[{context}] '{field}' must be an object")
