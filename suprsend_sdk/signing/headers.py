from email.utils import formatdate

from suprsend_sdk.config.settings import Settings
from suprsend_sdk.signing.signature import get_request_signature


def build_signed_headers(settings: Settings, method: str, url: str, body: str) -> dict[str, str]:
    """Build request headers including the workspace Authorization header."""
    headers = {
        "Content-Type": "application/json; charset=utf-8",
        "User-Agent": settings.user_agent,
        "Date": formatdate(usegmt=True),
    }
    signature = get_request_signature(url, method, body, headers, settings.workspace_secret)
    headers["Authorization"] = f"{settings.workspace_key}:{signature}"
    return headers
