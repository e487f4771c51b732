from suprsend_sdk.api.models import SendResult
from suprsend_sdk.api.sender import send_signed
from suprsend_sdk.bulk import kinds
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.records.event import Event
from suprsend_sdk.transport.base import BaseTransport


class EventCollector:
    """Sends single events to the hub."""

    def __init__(self, settings: Settings, transport: BaseTransport) -> None:
        self._settings = settings
        self._transport = transport
        self._url = kinds.EVENTS.url(settings)

    async def collect(self, event: Event) -> SendResult:
        """Validate and send one event.

        Raises:
            InputValueError: if the event fails validation.
        """
        payload, _ = event.get_final_json(self._settings, is_part_of_bulk=False)
        return await send_signed(self._settings, self._transport, self._url, payload)
