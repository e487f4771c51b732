from suprsend_sdk.records.exceptions import SuprsendError


class TransportError(SuprsendError):
    """Raised when a request cannot be completed (timeout, connection, DNS)."""
