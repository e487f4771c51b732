from dataclasses import asdict, dataclass, field
from typing import Any

STATUS_SUCCESS = "success"
STATUS_PARTIAL = "partial"
STATUS_FAIL = "fail"


@dataclass(frozen=True)
class ValidatedRecord:
    """A record's wire payload with its apparent size, ready for packing."""

    payload: dict[str, Any]
    apparent_size_bytes: int


@dataclass(frozen=True)
class FailedRecord:
    """A record that was not accepted, with the reason and status code."""

    record: Any
    error: str
    code: int = 500

    @classmethod
    def from_invalid(cls, record: Any, exc: Exception) -> "FailedRecord":
        return cls(record=record, error=str(exc), code=500)


@dataclass
class ChunkResult:
    """Outcome of one chunk (or of the synthetic invalid-records chunk)."""

    status: str
    status_code: int
    total: int = 0
    success: int = 0
    failure: int = 0
    failed_records: list[FailedRecord] = field(default_factory=list)
    message: str | None = None

    @classmethod
    def empty_success(cls) -> "ChunkResult":
        return cls(status=STATUS_SUCCESS, status_code=200)

    @classmethod
    def from_invalid_records(cls, invalid_records: list[FailedRecord]) -> "ChunkResult":
        return cls(
            status=STATUS_FAIL,
            status_code=500,
            total=len(invalid_records),
            failure=len(invalid_records),
            failed_records=list(invalid_records),
        )


@dataclass
class BulkResult:
    """Aggregate outcome of one bulk operation, returned to the caller."""

    status: str | None = None
    total: int = 0
    success: int = 0
    failure: int = 0
    failed_records: list[FailedRecord] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
