from typing import Any

from suprsend_sdk.api.models import SendResult
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.logging.logger import Log
from suprsend_sdk.records.sizing import serialize
from suprsend_sdk.signing.headers import build_signed_headers
from suprsend_sdk.transport.base import BaseTransport
from suprsend_sdk.transport.exceptions import TransportError


async def send_signed(
    settings: Settings,
    transport: BaseTransport,
    url: str,
    payload: dict[str, Any],
) -> SendResult:
    """POST one signed payload; transport failures are reported, not raised."""
    body = serialize(payload)
    headers = build_signed_headers(settings, "POST", url, body)
    try:
        response = await transport.send("POST", url, body, headers)
    except TransportError as exc:
        Log.error(f"Request to {url} failed: {exc}")
        return SendResult(success=False, status="fail", status_code=500, message=str(exc))
    return SendResult(
        success=response.is_success,
        status="success" if response.is_success else "fail",
        status_code=response.status_code,
        message=response.text,
    )
