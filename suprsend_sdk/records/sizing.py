"""Apparent-size estimation for record payloads.

The estimate is the UTF-8 length of the wire JSON plus fixed allowances for
keys the hub or the bulk wrapper add later. It is only used for packing
decisions and is not an exact byte count.
"""

import copy
import json
from typing import Any

from suprsend_sdk.config.limits import (
    ALLOW_ATTACHMENTS_IN_BULK_API,
    ATTACHMENT_UPLOAD_ENABLED,
    ATTACHMENT_URL_POTENTIAL_SIZE_IN_BYTES,
    WORKFLOW_RUNTIME_KEYS_POTENTIAL_SIZE_IN_BYTES,
)
from suprsend_sdk.records.exceptions import InputValueError

ATTACHMENTS_KEY = "$attachments"


def serialize(payload: Any) -> str:
    """Serialize a payload to its wire JSON form."""
    return json.dumps(payload, ensure_ascii=False)


def json_size_in_bytes(payload: Any) -> int:
    """Return the UTF-8 size of the payload's wire JSON.

    Raises:
        InputValueError: if the payload holds values JSON cannot encode
                         (dates, sets, circular references).
    """
    try:
        return len(serialize(payload).encode("utf-8"))
    except (TypeError, ValueError) as exc:
        raise InputValueError(f"payload is not json serializable: {exc}") from exc


def apply_attachment_policy(
    body: dict[str, Any],
    container_key: str,
    is_part_of_bulk: bool,
) -> tuple[dict[str, Any], int]:
    """Apply the attachment policy to ``body[container_key]["$attachments"]``.

    Args:
        body: The record's wire payload. It is never mutated.
        container_key: Key of the dict holding ``$attachments``
                       ("properties" for events, "data" for workflows).
        is_part_of_bulk: Whether the payload travels inside a bulk call.

    Returns:
        Tuple of the payload to send and its apparent size in bytes.
    """
    container = body.get(container_key)
    attachments = container.get(ATTACHMENTS_KEY) if isinstance(container, dict) else None
    if not attachments:
        return body, json_size_in_bytes(body)

    if is_part_of_bulk and not ALLOW_ATTACHMENTS_IN_BULK_API:
        stripped = copy.deepcopy(body)
        del stripped[container_key][ATTACHMENTS_KEY]
        return stripped, json_size_in_bytes(stripped)

    if ATTACHMENT_UPLOAD_ENABLED:
        # uploaded attachments travel as urls: size without inline data plus a url allowance
        sized = copy.deepcopy(body)
        for attachment in sized[container_key][ATTACHMENTS_KEY]:
            if isinstance(attachment, dict):
                attachment.pop("data", None)
        extra_bytes = len(attachments) * ATTACHMENT_URL_POTENTIAL_SIZE_IN_BYTES
        return body, json_size_in_bytes(sized) + extra_bytes

    return body, json_size_in_bytes(body)


def get_apparent_event_size(
    event: dict[str, Any], is_part_of_bulk: bool
) -> tuple[dict[str, Any], int]:
    return apply_attachment_policy(event, "properties", is_part_of_bulk)


def get_apparent_workflow_body_size(
    body: dict[str, Any], is_part_of_bulk: bool
) -> tuple[dict[str, Any], int]:
    body, size = apply_attachment_policy(body, "data", is_part_of_bulk)
    return body, size + WORKFLOW_RUNTIME_KEYS_POTENTIAL_SIZE_IN_BYTES


def get_apparent_identity_event_size(event: dict[str, Any]) -> int:
    return json_size_in_bytes(event)
