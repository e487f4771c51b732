from suprsend_sdk.bulk.coordinator import (
    BulkCoordinator,
    BulkEvents,
    BulkUsersEdit,
    BulkWorkflows,
    BulkWorkflowTrigger,
)
from suprsend_sdk.bulk.factory import BulkFactory
from suprsend_sdk.bulk.models import BulkResult, ChunkResult, FailedRecord, ValidatedRecord

__all__ = [
    "BulkCoordinator",
    "BulkEvents",
    "BulkFactory",
    "BulkResult",
    "BulkUsersEdit",
    "BulkWorkflowTrigger",
    "BulkWorkflows",
    "ChunkResult",
    "FailedRecord",
    "ValidatedRecord",
]
