from dataclasses import dataclass


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of one HTTP exchange."""

    status_code: int
    text: str = ""

    @property
    def is_success(self) -> bool:
        return self.status_code // 100 == 2
