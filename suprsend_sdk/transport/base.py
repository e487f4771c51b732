from abc import ABC, abstractmethod

from suprsend_sdk.transport.models import TransportResponse


class BaseTransport(ABC):
    """Contract for all HTTP transport adapters."""

    @abstractmethod
    async def send(
        self,
        method: str,
        url: str,
        body: str,
        headers: dict[str, str],
    ) -> TransportResponse:
        """Send one request and return its status and body.

        Non-2xx responses are returned, not raised.

        Raises:
            TransportError: if no response could be obtained.
        """
