import base64
import hashlib
import hmac
from urllib.parse import urlsplit


def _request_uri(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.path}?{parts.query}" if parts.query else parts.path


def get_request_signature(
    url: str,
    method: str,
    body: str,
    headers: dict[str, str],
    secret: str,
) -> str:
    """Return the base64 HMAC-SHA256 signature for a hub request.

    The signed string is ``METHOD\\nMD5(body)\\nContent-Type\\nDate\\nURI``.
    GET requests sign an empty content digest.
    """
    content_md5 = "" if method == "GET" else hashlib.md5(body.encode("utf-8")).hexdigest()
    sign_string = "\n".join(
        [
            method,
            content_md5,
            headers.get("Content-Type", ""),
            headers.get("Date", ""),
            _request_uri(url),
        ]
    )
    digest = hmac.new(secret.encode("utf-8"), sign_string.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")
