import httpx

from suprsend_sdk.transport.base import BaseTransport
from suprsend_sdk.transport.exceptions import TransportError
from suprsend_sdk.transport.models import TransportResponse


class HttpxTransport(BaseTransport):
    """Transport adapter built on httpx.AsyncClient.

    When a client is injected its connection pool is shared across calls;
    otherwise a short-lived client is opened per request.
    """

    def __init__(
        self,
        *,
        timeout_seconds: int,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._client = client

    async def send(
        self,
        method: str,
        url: str,
        body: str,
        headers: dict[str, str],
    ) -> TransportResponse:
        content = body.encode("utf-8") if body else None
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, content=content, headers=headers, timeout=self._timeout_seconds
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                    response = await client.request(method, url, content=content, headers=headers)
        except httpx.TimeoutException as exc:
            raise TransportError(f"request timed out: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"network error: {exc}") from exc
        return TransportResponse(status_code=response.status_code, text=response.text)
