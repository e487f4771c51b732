import copy
from abc import abstractmethod
from collections.abc import Callable
from typing import Any

from suprsend_sdk.config.limits import (
    SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES,
    SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE,
)
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.records.base import BaseRecord
from suprsend_sdk.records.exceptions import InputValueError
from suprsend_sdk.records.sizing import get_apparent_workflow_body_size
from suprsend_sdk.records.validator import (
    validate_workflow_body_schema,
    validate_workflow_trigger_body_schema,
)


class _WorkflowBodyRecord(BaseRecord):
    """Shared behaviour of records whose payload is a caller-supplied body."""

    _schema_validator: Callable[[dict[str, Any]], dict[str, Any]]
    _label: str

    def __init__(self, body: dict[str, Any]) -> None:
        if not isinstance(body, dict):
            raise InputValueError(f"{self._label} body must be a json/dictionary")
        self.body = body

    @abstractmethod
    def _extra_keys(self) -> dict[str, Any]:
        """Return the keys merged over the body, such as tenant and idempotency keys."""

    def get_final_json(
        self,
        settings: Settings,
        is_part_of_bulk: bool = False,
    ) -> tuple[dict[str, Any], int]:
        body = {**copy.deepcopy(self.body), **self._extra_keys()}
        body = self._schema_validator(body)
        body, apparent_size = get_apparent_workflow_body_size(body, is_part_of_bulk)
        if apparent_size > SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES:
            raise InputValueError(
                f"{self._label} body too big - {apparent_size} Bytes, "
                f"must not cross {SINGLE_EVENT_MAX_APPARENT_SIZE_IN_BYTES_READABLE}"
            )
        return body, apparent_size

    def as_json(self) -> dict[str, Any]:
        return {**self.body, **self._extra_keys()}


class Workflow(_WorkflowBodyRecord):
    """Legacy workflow definition sent inline with its template and users."""

    _schema_validator = staticmethod(validate_workflow_body_schema)
    _label = "workflow"

    def __init__(
        self,
        body: dict[str, Any],
        *,
        idempotency_key: str | None = None,
        tenant_id: str | None = None,
        brand_id: str | None = None,
    ) -> None:
        super().__init__(body)
        self.idempotency_key = idempotency_key
        self.tenant_id = tenant_id
        self.brand_id = brand_id

    def _extra_keys(self) -> dict[str, Any]:
        extra: dict[str, Any] = {}
        if self.idempotency_key:
            extra["$idempotency_key"] = self.idempotency_key
        if self.tenant_id:
            extra["tenant_id"] = self.tenant_id
        if self.brand_id:
            extra["brand_id"] = self.brand_id
        return extra


class WorkflowTriggerRequest(_WorkflowBodyRecord):
    """Trigger of a workflow configured on the hub, addressed by its slug."""

    _schema_validator = staticmethod(validate_workflow_trigger_body_schema)
    _label = "workflow trigger request"

    def __init__(
        self,
        body: dict[str, Any],
        *,
        idempotency_key: str | None = None,
        tenant_id: str | None = None,
        cancellation_key: str | None = None,
    ) -> None:
        super().__init__(body)
        self.idempotency_key = idempotency_key
        self.tenant_id = tenant_id
        self.cancellation_key = cancellation_key

    def _extra_keys(self) -> dict[str, Any]:
        extra: dict[str, Any] = {}
        if self.idempotency_key:
            extra["$idempotency_key"] = self.idempotency_key
        if self.tenant_id:
            extra["tenant_id"] = self.tenant_id
        if self.cancellation_key:
            extra["cancellation_key"] = self.cancellation_key
        return extra
