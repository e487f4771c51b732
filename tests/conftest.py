import json
from typing import Any

import pytest

from suprsend_sdk.config.settings import Settings
from suprsend_sdk.transport.base import BaseTransport
from suprsend_sdk.transport.exceptions import TransportError
from suprsend_sdk.transport.models import TransportResponse


class RecordingTransport(BaseTransport):
    """In-memory transport that records requests and replays queued outcomes."""

    def __init__(self, outcomes: list[TransportResponse | Exception] | None = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self._outcomes = list(outcomes or [])

    async def send(
        self,
        method: str,
        url: str,
        body: str,
        headers: dict[str, str],
    ) -> TransportResponse:
        self.calls.append({"method": method, "url": url, "body": body, "headers": headers})
        outcome = self._outcomes.pop(0) if self._outcomes else TransportResponse(202, "OK")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def sent_payloads(self, index: int = 0) -> list[dict[str, Any]]:
        return json.loads(self.calls[index]["body"])


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        workspace_key="ws_key",
        workspace_secret="ws_secret",
        base_url="https://hub.example.com",
    )


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def failing_transport() -> RecordingTransport:
    return RecordingTransport([TransportError("network error: connection refused")])


@pytest.fixture()
def transport_factory() -> type[RecordingTransport]:
    return RecordingTransport
