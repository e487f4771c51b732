from suprsend_sdk.records.exceptions import SuprsendError


class BulkError(SuprsendError):
    """Base exception for bulk pipeline misuse."""


class RecordTooLargeError(BulkError):
    """Raised when a validated record exceeds its kind's per-record limit."""
