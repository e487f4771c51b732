from suprsend_sdk.api.events import EventCollector
from suprsend_sdk.api.models import SendResult
from suprsend_sdk.api.workflows import WorkflowsApi

__all__ = ["EventCollector", "SendResult", "WorkflowsApi"]
