from collections.abc import Callable

from suprsend_sdk.bulk.chunk import BulkChunk
from suprsend_sdk.bulk.exceptions import BulkError
from suprsend_sdk.bulk.models import ValidatedRecord


def chunkify(
    records: list[ValidatedRecord],
    new_chunk: Callable[[], BulkChunk],
) -> list[BulkChunk]:
    """Pack records into chunks greedily, preserving arrival order.

    A record that does not fit closes the current chunk and opens the next
    one; records are never skipped or reordered.

    Raises:
        RecordTooLargeError: if a record exceeds the per-record limit.
        BulkError: if an empty chunk refuses a record.
    """
    chunks: list[BulkChunk] = []
    cursor = 0
    while cursor < len(records):
        chunk = new_chunk()
        chunks.append(chunk)
        while cursor < len(records) and chunk.try_add(records[cursor]):
            cursor += 1
        if chunk.count == 0:
            raise BulkError(
                f"record at index {cursor} does not fit into an empty chunk; check bulk limits"
            )
    return chunks
