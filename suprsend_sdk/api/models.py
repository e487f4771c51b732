from dataclasses import dataclass


@dataclass(frozen=True)
class SendResult:
    """Outcome of a single (non-bulk) request."""

    success: bool
    status: str
    status_code: int
    message: str
