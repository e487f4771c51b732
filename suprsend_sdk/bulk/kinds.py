"""Endpoint and limits for each kind of bulk submission."""

from dataclasses import dataclass

from suprsend_sdk.config.limits import (
    BODY_MAX_APPARENT_SIZE_IN_BYTES,
    IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
    MAX_EVENTS_IN_BULK_API,
    MAX_IDENTITY_EVENTS_IN_BULK_API,
    MAX_WORKFLOWS_IN_BULK_API,
    SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)
from suprsend_sdk.config.settings import Settings


@dataclass(frozen=True)
class BulkKind:
    name: str
    path_template: str
    max_records: int
    max_record_bytes: int
    max_record_bytes_readable: str
    max_body_bytes: int = BODY_MAX_APPARENT_SIZE_IN_BYTES

    def url(self, settings: Settings) -> str:
        path = self.path_template.format(workspace_key=settings.workspace_key)
        return f"{settings.base_url}{path}"


EVENTS = BulkKind(
    name="event",
    path_template="event/",
    max_records=MAX_EVENTS_IN_BULK_API,
    max_record_bytes=SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    max_record_bytes_readable=SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)

WORKFLOWS = BulkKind(
    name="workflow",
    path_template="{workspace_key}/trigger/",
    max_records=MAX_WORKFLOWS_IN_BULK_API,
    max_record_bytes=SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    max_record_bytes_readable=SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)

WORKFLOW_TRIGGERS = BulkKind(
    name="workflow trigger",
    path_template="trigger/",
    max_records=MAX_WORKFLOWS_IN_BULK_API,
    max_record_bytes=SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    max_record_bytes_readable=SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)

IDENTITY_EVENTS = BulkKind(
    name="identity event",
    path_template="event/",
    max_records=MAX_IDENTITY_EVENTS_IN_BULK_API,
    max_record_bytes=IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    max_record_bytes_readable=IDENTITY_SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)
