import copy
from typing import Any

from suprsend_sdk.config.limits import (
    SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.records.base import BaseRecord, epoch_milliseconds, new_insert_id
from suprsend_sdk.records.exceptions import InputValueError
from suprsend_sdk.records.sizing import get_apparent_event_size
from suprsend_sdk.records.validator import (
    validate_distinct_id,
    validate_event_name,
    validate_track_event_schema,
)


class Event(BaseRecord):
    """A named event performed by a user, used to trigger event-based workflows."""

    def __init__(
        self,
        distinct_id: str,
        event_name: str,
        properties: dict[str, Any] | None = None,
        *,
        idempotency_key: str | None = None,
        tenant_id: str | None = None,
    ) -> None:
        self.distinct_id = validate_distinct_id(distinct_id)
        self.event_name = validate_event_name(event_name)
        if properties is None:
            properties = {}
        if not isinstance(properties, dict):
            raise InputValueError("properties must be a dictionary")
        self.properties = properties
        self.idempotency_key = idempotency_key
        self.tenant_id = tenant_id

    def get_final_json(
        self,
        settings: Settings,
        is_part_of_bulk: bool = False,
    ) -> tuple[dict[str, Any], int]:
        event_dict: dict[str, Any] = {
            "$insert_id": new_insert_id(),
            "$time": epoch_milliseconds(),
            "event": self.event_name,
            "env": settings.workspace_key,
            "distinct_id": self.distinct_id,
            "properties": {
                **copy.deepcopy(self.properties),
                "$ss_sdk_version": settings.user_agent,
            },
        }
        if self.idempotency_key:
            event_dict["$idempotency_key"] = self.idempotency_key
        if self.tenant_id:
            event_dict["tenant_id"] = self.tenant_id

        event_dict = validate_track_event_schema(event_dict)
        event_dict, apparent_size = get_apparent_event_size(event_dict, is_part_of_bulk)
        if apparent_size > SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES:
            raise InputValueError(
                f"Event properties too big - {apparent_size} Bytes, "
                f"must not cross {SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE}"
            )
        return event_dict, apparent_size

    def as_json(self) -> dict[str, Any]:
        event_dict: dict[str, Any] = {
            "event": self.event_name,
            "distinct_id": self.distinct_id,
            "properties": self.properties,
        }
        if self.idempotency_key:
            event_dict["$idempotency_key"] = self.idempotency_key
        if self.tenant_id:
            event_dict["tenant_id"] = self.tenant_id
        return event_dict
