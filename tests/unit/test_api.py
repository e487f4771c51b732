import pytest

from suprsend_sdk.api.events import EventCollector
from suprsend_sdk.api.workflows import WorkflowsApi
from suprsend_sdk.bulk.coordinator import BulkWorkflowTrigger
from suprsend_sdk.records.event import Event
from suprsend_sdk.records.exceptions import InputValueError
from suprsend_sdk.records.workflow import Workflow, WorkflowTriggerRequest
from suprsend_sdk.transport.models import TransportResponse


class TestEventCollector:
    @pytest.mark.asyncio
    async def test_collect_posts_single_event(self, settings, transport) -> None:
        collector = EventCollector(settings, transport)

        result = await collector.collect(Event("user_1", "order_placed", {"amount": 10}))

        assert result.success
        assert result.status == "success"
        assert result.status_code == 202
        call = transport.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == "https://hub.example.com/event/"
        assert transport.sent_payloads(0)["event"] == "order_placed"

    @pytest.mark.asyncio
    async def test_rejected_event_reports_failure(self, settings, transport_factory) -> None:
        transport = transport_factory([TransportResponse(400, "bad request")])
        collector = EventCollector(settings, transport)

        result = await collector.collect(Event("user_1", "order_placed"))

        assert not result.success
        assert result.status == "fail"
        assert result.status_code == 400
        assert result.message == "bad request"

    @pytest.mark.asyncio
    async def test_transport_error_reports_500(self, settings, failing_transport) -> None:
        collector = EventCollector(settings, failing_transport)

        result = await collector.collect(Event("user_1", "order_placed"))

        assert not result.success
        assert result.status_code == 500
        assert "connection refused" in result.message


class TestWorkflowsApi:
    @pytest.mark.asyncio
    async def test_trigger_posts_to_trigger_endpoint(self, settings, transport) -> None:
        api = WorkflowsApi(settings, transport)
        request = WorkflowTriggerRequest({"workflow": "order-shipped", "recipients": ["user_1"]})

        result = await api.trigger(request)

        assert result.success
        assert transport.calls[0]["url"] == "https://hub.example.com/trigger/"
        assert transport.sent_payloads(0)["workflow"] == "order-shipped"

    @pytest.mark.asyncio
    async def test_trigger_rejects_other_record_types(self, settings, transport) -> None:
        api = WorkflowsApi(settings, transport)
        with pytest.raises(InputValueError, match="WorkflowTriggerRequest"):
            await api.trigger(Workflow({"name": "welcome"}))
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_trigger_validation_error_raises(self, settings, transport) -> None:
        api = WorkflowsApi(settings, transport)
        with pytest.raises(InputValueError, match="recipients"):
            await api.trigger(WorkflowTriggerRequest({"workflow": "order-shipped"}))
        assert transport.calls == []

    def test_bulk_trigger_instance_is_fresh(self, settings, transport) -> None:
        api = WorkflowsApi(settings, transport)
        first = api.bulk_trigger_instance()
        second = api.bulk_trigger_instance()
        assert isinstance(first, BulkWorkflowTrigger)
        assert first is not second


def _make_workflow_body() -> dict:
    return {
        "name": "welcome",
        "template": "welcome-email",
        "notification_category": "transactional",
        "users": [{"distinct_id": "user_1"}],
    }


class TestLegacyWorkflowTrigger:
    @pytest.mark.asyncio
    async def test_posts_to_workspace_trigger_endpoint(self, settings, transport) -> None:
        api = WorkflowsApi(settings, transport)

        result = await api.trigger_workflow(Workflow(_make_workflow_body(), brand_id="brand-1"))

        assert result.success
        assert transport.calls[0]["url"] == "https://hub.example.com/ws_key/trigger/"
        payload = transport.sent_payloads(0)
        assert payload["name"] == "welcome"
        assert payload["brand_id"] == "brand-1"

    @pytest.mark.asyncio
    async def test_rejects_trigger_requests(self, settings, transport) -> None:
        api = WorkflowsApi(settings, transport)
        request = WorkflowTriggerRequest({"workflow": "order-shipped", "recipients": ["user_1"]})
        with pytest.raises(InputValueError, match="must be a Workflow"):
            await api.trigger_workflow(request)
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_invalid_workflow_raises_before_sending(self, settings, transport) -> None:
        api = WorkflowsApi(settings, transport)
        with pytest.raises(InputValueError, match="users"):
            await api.trigger_workflow(Workflow({**_make_workflow_body(), "users": []}))
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_transport_error_reports_500(self, settings, failing_transport) -> None:
        api = WorkflowsApi(settings, failing_transport)

        result = await api.trigger_workflow(Workflow(_make_workflow_body()))

        assert not result.success
        assert result.status_code == 500
