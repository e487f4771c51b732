import pytest

from suprsend_sdk.bulk.models import ChunkResult, FailedRecord
from suprsend_sdk.bulk.response import BulkResponseAggregator


def _make_chunk_result(status: str, total: int = 2) -> ChunkResult:
    if status == "success":
        return ChunkResult(status="success", status_code=202, total=total, success=total)
    return ChunkResult(
        status="fail",
        status_code=500,
        total=total,
        failure=total,
        failed_records=[FailedRecord(record={"i": i}, error="boom", code=500) for i in range(total)],
    )


class TestStatusMerge:
    @pytest.mark.parametrize(
        ("statuses", "expected"),
        [
            (["success", "success"], "success"),
            (["fail", "fail"], "fail"),
            (["success", "fail"], "partial"),
            (["fail", "success"], "partial"),
            (["success", "fail", "success"], "partial"),
        ],
    )
    def test_status_transitions(self, statuses: list[str], expected: str) -> None:
        aggregator = BulkResponseAggregator()
        for status in statuses:
            aggregator.merge(_make_chunk_result(status))
        assert aggregator.result.status == expected

    def test_status_unset_before_any_merge(self) -> None:
        assert BulkResponseAggregator().result.status is None

    def test_none_is_ignored(self) -> None:
        aggregator = BulkResponseAggregator()
        aggregator.merge(None)
        assert aggregator.result.total == 0
        assert aggregator.result.status is None


class TestCounts:
    def test_sums_counts_and_concatenates_failed_records(self) -> None:
        aggregator = BulkResponseAggregator()
        aggregator.merge(_make_chunk_result("success", total=3))
        aggregator.merge(_make_chunk_result("fail", total=2))

        result = aggregator.result
        assert (result.total, result.success, result.failure) == (5, 3, 2)
        assert [r.record for r in result.failed_records] == [{"i": 0}, {"i": 1}]

    def test_invalid_records_chunk_merges_like_any_chunk(self) -> None:
        invalid = [FailedRecord.from_invalid({"workflow": "w"}, ValueError("bad"))]
        aggregator = BulkResponseAggregator()
        aggregator.merge(ChunkResult.from_invalid_records(invalid))
        aggregator.merge(_make_chunk_result("success", total=4))

        result = aggregator.result
        assert result.status == "partial"
        assert result.total == 5
        assert result.failure == 1
        assert result.failed_records[0].code == 500
        assert result.failed_records[0].error == "bad"

    def test_empty_success(self) -> None:
        aggregator = BulkResponseAggregator()
        aggregator.merge(ChunkResult.empty_success())
        result = aggregator.result
        assert result.status == "success"
        assert result.total == 0


class TestResultSnapshot:
    def test_result_is_independent_copy(self) -> None:
        aggregator = BulkResponseAggregator()
        aggregator.merge(_make_chunk_result("fail", total=1))
        snapshot = aggregator.result
        aggregator.merge(_make_chunk_result("fail", total=1))
        aggregator.add_warnings(["later"])

        assert len(snapshot.failed_records) == 1
        assert snapshot.warnings == []

    def test_to_dict_shape(self) -> None:
        aggregator = BulkResponseAggregator()
        aggregator.merge(_make_chunk_result("fail", total=1))
        data = aggregator.result.to_dict()
        assert set(data) == {"status", "total", "success", "failure", "failed_records", "warnings"}
        assert data["failed_records"] == [{"record": {"i": 0}, "error": "boom", "code": 500}]
