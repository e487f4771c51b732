from suprsend_sdk.api.events import EventCollector
from suprsend_sdk.api.models import SendResult
from suprsend_sdk.api.workflows import WorkflowsApi
from suprsend_sdk.bulk.coordinator import BulkEvents, BulkUsersEdit, BulkWorkflows
from suprsend_sdk.bulk.factory import BulkFactory
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.logging.logger import Log
from suprsend_sdk.records.event import Event
from suprsend_sdk.records.user_edit import UserEdit
from suprsend_sdk.transport.base import BaseTransport
from suprsend_sdk.transport.httpx_adapter import HttpxTransport


class SuprsendClient:
    """Entry point: validates settings and wires APIs to one transport."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: BaseTransport | None = None,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._validate()
        Log.configure(self._settings.log_level)
        self._transport = transport or HttpxTransport(
            timeout_seconds=self._settings.request_timeout_seconds
        )
        self._event_collector = EventCollector(self._settings, self._transport)
        self.workflows = WorkflowsApi(self._settings, self._transport)
        self.bulk_events = BulkFactory(BulkEvents, self._settings, self._transport)
        self.bulk_workflows = BulkFactory(BulkWorkflows, self._settings, self._transport)
        self.bulk_users = BulkFactory(BulkUsersEdit, self._settings, self._transport)

    @property
    def settings(self) -> Settings:
        return self._settings

    def _validate(self) -> None:
        if not self._settings.workspace_key:
            raise ValueError("Missing mandatory workspace_key")
        if not self._settings.workspace_secret:
            raise ValueError("Missing mandatory workspace_secret")
        if not self._settings.base_url:
            raise ValueError("Missing mandatory base_url")

    async def track_event(self, event: Event) -> SendResult:
        return await self._event_collector.collect(event)

    def user_edit(self, distinct_id: str) -> UserEdit:
        return UserEdit(distinct_id)
