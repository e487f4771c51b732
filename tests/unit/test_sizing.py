from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from suprsend_sdk.config.limits import (
    ATTACHMENT_URL_POTENTIAL_SIZE_IN_BYTES,
    WORKFLOW_RUNTIME_KEYS_POTENTIAL_SIZE_IN_BYTES,
)
from suprsend_sdk.records import sizing
from suprsend_sdk.records.exceptions import InputValueError
from suprsend_sdk.records.sizing import (
    get_apparent_event_size,
    get_apparent_identity_event_size,
    get_apparent_workflow_body_size,
    json_size_in_bytes,
    serialize,
)


def _make_event_with_attachment() -> dict:
    return {
        "event": "invoice_sent",
        "properties": {
            "$attachments": [{"filename": "a.pdf", "data": "x" * 500}],
        },
    }


class TestJsonSize:
    def test_counts_utf8_bytes(self) -> None:
        assert json_size_in_bytes({"n": "é"}) == len('{"n": "é"}'.encode("utf-8"))

    def test_serialize_keeps_non_ascii(self) -> None:
        assert serialize({"n": "é"}) == '{"n": "é"}'


class TestEventSize:
    def test_plain_event(self) -> None:
        event = {"event": "x", "properties": {"a": 1}}
        body, size = get_apparent_event_size(event, is_part_of_bulk=True)
        assert body is event
        assert size == json_size_in_bytes(event)

    def test_attachments_kept_in_bulk_by_default(self) -> None:
        event = _make_event_with_attachment()
        body, size = get_apparent_event_size(event, is_part_of_bulk=True)
        assert "$attachments" in body["properties"]
        assert size == json_size_in_bytes(event)

    def test_attachments_stripped_when_bulk_disallows(self) -> None:
        event = _make_event_with_attachment()
        with patch.object(sizing, "ALLOW_ATTACHMENTS_IN_BULK_API", False):
            body, size = get_apparent_event_size(event, is_part_of_bulk=True)

        assert "$attachments" not in body["properties"]
        assert "$attachments" in event["properties"]
        assert size == json_size_in_bytes(body)

    def test_uploaded_attachments_sized_as_urls(self) -> None:
        event = _make_event_with_attachment()
        with patch.object(sizing, "ATTACHMENT_UPLOAD_ENABLED", True):
            body, size = get_apparent_event_size(event, is_part_of_bulk=False)

        without_data = {
            "event": "invoice_sent",
            "properties": {"$attachments": [{"filename": "a.pdf"}]},
        }
        assert body is event
        assert size == json_size_in_bytes(without_data) + ATTACHMENT_URL_POTENTIAL_SIZE_IN_BYTES


class TestWorkflowSize:
    def test_runtime_allowance_added(self) -> None:
        body = {"workflow": "w", "recipients": ["u"], "data": {}}
        _, size = get_apparent_workflow_body_size(body, is_part_of_bulk=True)
        assert size == json_size_in_bytes(body) + WORKFLOW_RUNTIME_KEYS_POTENTIAL_SIZE_IN_BYTES


def test_identity_size_is_plain_json_size() -> None:
    payload = {"distinct_id": "u", "$user_operations": [{"$set": {"a": 1}}]}
    assert get_apparent_identity_event_size(payload) == json_size_in_bytes(payload)


class TestUnserializablePayloads:
    @pytest.mark.parametrize(
        "value",
        [datetime(2026, 10, 19, tzinfo=timezone.utc), {1, 2}, object()],
    )
    def test_unencodable_value_raises_input_error(self, value) -> None:
        with pytest.raises(InputValueError, match="not json serializable"):
            json_size_in_bytes({"properties": {"value": value}})

    def test_circular_reference_raises_input_error(self) -> None:
        payload: dict = {"properties": {}}
        payload["properties"]["self"] = payload
        with pytest.raises(InputValueError, match="not json serializable"):
            json_size_in_bytes(payload)
