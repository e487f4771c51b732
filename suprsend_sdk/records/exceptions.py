class SuprsendError(Exception):
    """Base exception for all SDK errors."""


class InputValueError(SuprsendError):
    """Raised when a record or argument fails local validation."""
