from suprsend_sdk.bulk.coordinator import BulkCoordinator
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.transport.base import BaseTransport


class BulkFactory:
    """Creates fresh bulk coordinators of one kind sharing settings and transport."""

    def __init__(
        self,
        coordinator_cls: type[BulkCoordinator],
        settings: Settings,
        transport: BaseTransport,
    ) -> None:
        self._coordinator_cls = coordinator_cls
        self._settings = settings
        self._transport = transport

    def new_instance(self) -> BulkCoordinator:
        return self._coordinator_cls(self._settings, self._transport)
