from dataclasses import replace

from suprsend_sdk.bulk.models import (
    STATUS_FAIL,
    STATUS_PARTIAL,
    STATUS_SUCCESS,
    BulkResult,
    ChunkResult,
)


class BulkResponseAggregator:
    """Folds chunk results into one running BulkResult."""

    def __init__(self) -> None:
        self._result = BulkResult()

    def merge(self, chunk_result: ChunkResult | None) -> None:
        """Merge one chunk outcome.

        The first merge sets the status; mixing success and fail afterwards
        turns it into partial. Counts and failed records accumulate.
        """
        if chunk_result is None:
            return
        current = self._result.status
        if current is None:
            self._result.status = chunk_result.status
        elif (current == STATUS_SUCCESS and chunk_result.status == STATUS_FAIL) or (
            current == STATUS_FAIL and chunk_result.status == STATUS_SUCCESS
        ):
            self._result.status = STATUS_PARTIAL
        self._result.total += chunk_result.total
        self._result.success += chunk_result.success
        self._result.failure += chunk_result.failure
        self._result.failed_records.extend(chunk_result.failed_records)

    def add_warnings(self, warnings: list[str]) -> None:
        self._result.warnings.extend(warnings)

    @property
    def result(self) -> BulkResult:
        """Return a copy of the aggregate, independent of further merges."""
        return replace(
            self._result,
            failed_records=list(self._result.failed_records),
            warnings=list(self._result.warnings),
        )
