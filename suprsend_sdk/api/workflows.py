from suprsend_sdk.api.models import SendResult
from suprsend_sdk.api.sender import send_signed
from suprsend_sdk.bulk import kinds
from suprsend_sdk.bulk.coordinator import BulkWorkflowTrigger
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.records.exceptions import InputValueError
from suprsend_sdk.records.workflow import Workflow, WorkflowTriggerRequest
from suprsend_sdk.transport.base import BaseTransport


class WorkflowsApi:
    """Triggers workflows, one at a time or in bulk."""

    def __init__(self, settings: Settings, transport: BaseTransport) -> None:
        self._settings = settings
        self._transport = transport
        self._url = kinds.WORKFLOW_TRIGGERS.url(settings)
        self._legacy_url = kinds.WORKFLOWS.url(settings)

    async def trigger(self, request: WorkflowTriggerRequest) -> SendResult:
        """Validate and send one workflow trigger request.

        Raises:
            InputValueError: if the request fails validation.
        """
        if not isinstance(request, WorkflowTriggerRequest):
            raise InputValueError("request must be a WorkflowTriggerRequest")
        payload, _ = request.get_final_json(self._settings, is_part_of_bulk=False)
        return await send_signed(self._settings, self._transport, self._url, payload)

    async def trigger_workflow(self, workflow: Workflow) -> SendResult:
        """Validate and send one legacy workflow to the workspace trigger endpoint.

        Raises:
            InputValueError: if the workflow fails validation.
        """
        if not isinstance(workflow, Workflow):
            raise InputValueError("workflow must be a Workflow")
        payload, _ = workflow.get_final_json(self._settings, is_part_of_bulk=False)
        return await send_signed(self._settings, self._transport, self._legacy_url, payload)

    def bulk_trigger_instance(self) -> BulkWorkflowTrigger:
        return BulkWorkflowTrigger(self._settings, self._transport)
