from suprsend_sdk.bulk.models import BulkResult
from suprsend_sdk.client import SuprsendClient
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.records import (
    Event,
    InputValueError,
    SuprsendError,
    UserEdit,
    Workflow,
    WorkflowTriggerRequest,
)
from suprsend_sdk.version import __version__

__all__ = [
    "BulkResult",
    "Event",
    "InputValueError",
    "Settings",
    "SuprsendClient",
    "SuprsendError",
    "UserEdit",
    "Workflow",
    "WorkflowTriggerRequest",
    "__version__",
]
