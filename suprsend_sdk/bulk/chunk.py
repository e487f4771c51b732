from suprsend_sdk.bulk.exceptions import RecordTooLargeError
from suprsend_sdk.bulk.kinds import BulkKind
from suprsend_sdk.bulk.models import (
    STATUS_FAIL,
    STATUS_SUCCESS,
    ChunkResult,
    FailedRecord,
    ValidatedRecord,
)
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.logging.logger import Log
from suprsend_sdk.records.sizing import serialize
from suprsend_sdk.signing.headers import build_signed_headers
from suprsend_sdk.transport.base import BaseTransport
from suprsend_sdk.transport.exceptions import TransportError


class BulkChunk:
    """A bounded group of validated records sent as one API call."""

    def __init__(self, kind: BulkKind, settings: Settings, transport: BaseTransport) -> None:
        self._kind = kind
        self._settings = settings
        self._transport = transport
        self._url = kind.url(settings)
        self.records: list[ValidatedRecord] = []
        self.count = 0
        self.size_bytes = 0
        self.result: ChunkResult | None = None

    def _limit_reached(self) -> bool:
        return self.count >= self._kind.max_records or self.size_bytes >= self._kind.max_body_bytes

    def try_add(self, record: ValidatedRecord) -> bool:
        """Add the record if it fits; return False when a new chunk is needed.

        Raises:
            RecordTooLargeError: if the record alone exceeds the per-record limit.
        """
        if self._limit_reached():
            return False
        if record.apparent_size_bytes > self._kind.max_record_bytes:
            raise RecordTooLargeError(
                f"{self._kind.name} too big - {record.apparent_size_bytes} Bytes, "
                f"must not cross {self._kind.max_record_bytes_readable}"
            )
        if self.size_bytes + record.apparent_size_bytes > self._kind.max_body_bytes:
            return False
        # counters first, then the record
        self.size_bytes += record.apparent_size_bytes
        self.count += 1
        self.records.append(record)
        return True

    async def dispatch(self) -> ChunkResult:
        """Send the chunk and record its outcome. Never raises for remote failures."""
        body = serialize([record.payload for record in self.records])
        if Log.is_debug_enabled():
            Log.debug(
                f"Bulk {self._kind.name} chunk: {self.count} records, "
                f"apparent {self.size_bytes} Bytes, body {len(body.encode('utf-8'))} Bytes",
                records=self.count,
            )
        headers = build_signed_headers(self._settings, "POST", self._url, body)
        try:
            response = await self._transport.send("POST", self._url, body, headers)
        except TransportError as exc:
            Log.error(f"Bulk {self._kind.name} chunk failed to send: {exc}")
            self.result = self._failed_result(500, str(exc))
            return self.result

        if response.is_success:
            self.result = ChunkResult(
                status=STATUS_SUCCESS,
                status_code=response.status_code,
                total=self.count,
                success=self.count,
            )
        else:
            Log.warning(
                f"Bulk {self._kind.name} chunk rejected with status {response.status_code}"
            )
            self.result = self._failed_result(response.status_code, response.text)
        return self.result

    def _failed_result(self, status_code: int, error: str) -> ChunkResult:
        return ChunkResult(
            status=STATUS_FAIL,
            status_code=status_code,
            total=self.count,
            failure=self.count,
            failed_records=[
                FailedRecord(record=record.payload, error=error, code=status_code)
                for record in self.records
            ],
            message=error,
        )
