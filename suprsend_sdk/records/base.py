import time
import uuid
from abc import ABC, abstractmethod
from typing import Any

from suprsend_sdk.config.settings import Settings


def new_insert_id() -> str:
    return str(uuid.uuid4())


def epoch_milliseconds() -> int:
    return int(time.time() * 1000)


class BaseRecord(ABC):
    """Contract for every record kind that can be sent to the hub."""

    @abstractmethod
    def get_final_json(
        self,
        settings: Settings,
        is_part_of_bulk: bool = False,
    ) -> tuple[dict[str, Any], int]:
        """Build the wire payload and its apparent size.

        Args:
            settings: SDK settings (workspace key, user agent).
            is_part_of_bulk: True when the payload will travel in a bulk chunk.

        Returns:
            Tuple of (payload, apparent_size_in_bytes).

        Raises:
            InputValueError: if the record fails validation or is too big.
        """

    @abstractmethod
    def as_json(self) -> dict[str, Any]:
        """Return a caller-facing representation, usable even when invalid."""

    def warnings(self) -> list[str]:
        """Return non-fatal messages collected while building the record."""
        return []
