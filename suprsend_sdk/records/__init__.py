from suprsend_sdk.records.base import BaseRecord
from suprsend_sdk.records.event import Event
from suprsend_sdk.records.exceptions import InputValueError, SuprsendError
from suprsend_sdk.records.user_edit import UserEdit
from suprsend_sdk.records.workflow import Workflow, WorkflowTriggerRequest

__all__ = [
    "BaseRecord",
    "Event",
    "InputValueError",
    "SuprsendError",
    "UserEdit",
    "Workflow",
    "WorkflowTriggerRequest",
]
