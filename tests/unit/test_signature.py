import base64
import hashlib
import hmac

from suprsend_sdk.signing.headers import build_signed_headers
from suprsend_sdk.signing.signature import get_request_signature

_HEADERS = {
    "Content-Type": "application/json; charset=utf-8",
    "Date": "Mon, 19 Oct 2026 10:00:00 GMT",
}


def _expected(sign_string: str, secret: str = "ws_secret") -> str:
    digest = hmac.new(secret.encode(), sign_string.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


class TestGetRequestSignature:
    def test_post_signs_body_digest(self) -> None:
        body = '[{"event": "order_placed"}]'
        signature = get_request_signature(
            "https://hub.example.com/event/", "POST", body, _HEADERS, "ws_secret"
        )
        sign_string = "\n".join(
            [
                "POST",
                hashlib.md5(body.encode()).hexdigest(),
                _HEADERS["Content-Type"],
                _HEADERS["Date"],
                "/event/",
            ]
        )
        assert signature == _expected(sign_string)

    def test_get_signs_empty_digest(self) -> None:
        signature = get_request_signature(
            "https://hub.example.com/v1/user/", "GET", "", _HEADERS, "ws_secret"
        )
        sign_string = "\n".join(["GET", "", _HEADERS["Content-Type"], _HEADERS["Date"], "/v1/user/"])
        assert signature == _expected(sign_string)

    def test_query_string_is_part_of_uri(self) -> None:
        with_query = get_request_signature(
            "https://hub.example.com/v1/user/?limit=10", "GET", "", _HEADERS, "ws_secret"
        )
        without_query = get_request_signature(
            "https://hub.example.com/v1/user/", "GET", "", _HEADERS, "ws_secret"
        )
        assert with_query != without_query

    def test_secret_changes_signature(self) -> None:
        a = get_request_signature("https://hub.example.com/event/", "POST", "{}", _HEADERS, "a")
        b = get_request_signature("https://hub.example.com/event/", "POST", "{}", _HEADERS, "b")
        assert a != b

    def test_non_ascii_body(self) -> None:
        body = '{"name": "Zoë"}'
        signature = get_request_signature(
            "https://hub.example.com/event/", "POST", body, _HEADERS, "ws_secret"
        )
        sign_string = "\n".join(
            [
                "POST",
                hashlib.md5(body.encode("utf-8")).hexdigest(),
                _HEADERS["Content-Type"],
                _HEADERS["Date"],
                "/event/",
            ]
        )
        assert signature == _expected(sign_string)


class TestBuildSignedHeaders:
    def test_authorization_header(self, settings) -> None:
        url = "https://hub.example.com/event/"
        headers = build_signed_headers(settings, "POST", url, "[]")

        key, signature = headers["Authorization"].split(":", 1)
        assert key == "ws_key"
        assert signature == get_request_signature(url, "POST", "[]", headers, "ws_secret")

    def test_standard_headers(self, settings) -> None:
        headers = build_signed_headers(settings, "POST", "https://hub.example.com/event/", "[]")

        assert headers["Content-Type"] == "application/json; charset=utf-8"
        assert headers["User-Agent"] == settings.user_agent
        assert headers["Date"].endswith("GMT")
