"""Bulk submission: validate, pack into chunks, dispatch one by one, aggregate."""

import copy
from typing import ClassVar, Generic, TypeVar

from suprsend_sdk.bulk import kinds
from suprsend_sdk.bulk.chunk import BulkChunk
from suprsend_sdk.bulk.kinds import BulkKind
from suprsend_sdk.bulk.models import BulkResult, ChunkResult, FailedRecord, ValidatedRecord
from suprsend_sdk.bulk.response import BulkResponseAggregator
from suprsend_sdk.bulk.sequencer import chunkify
from suprsend_sdk.config.settings import Settings
from suprsend_sdk.logging.logger import Log
from suprsend_sdk.records.base import BaseRecord
from suprsend_sdk.records.event import Event
from suprsend_sdk.records.exceptions import InputValueError
from suprsend_sdk.records.user_edit import UserEdit
from suprsend_sdk.records.workflow import Workflow, WorkflowTriggerRequest
from suprsend_sdk.transport.base import BaseTransport

R = TypeVar("R", bound=BaseRecord)


class BulkCoordinator(Generic[R]):
    """Queues records of one kind and submits them in size-bounded chunks.

    Subclasses bind ``record_type`` and ``kind``. Each ``trigger()`` call
    builds its own chunks and aggregate from the queued records.
    """

    record_type: ClassVar[type[BaseRecord]]
    kind: ClassVar[BulkKind]

    def __init__(self, settings: Settings, transport: BaseTransport) -> None:
        self._settings = settings
        self._transport = transport
        self._records: list[R] = []

    def __len__(self) -> int:
        return len(self._records)

    def append(self, *records: R) -> None:
        """Queue deep copies of the given records.

        Raises:
            InputValueError: if no record is given or one has the wrong type.
        """
        if not records:
            raise InputValueError(f"at least one {self.record_type.__name__} must be passed")
        for record in records:
            if not isinstance(record, self.record_type):
                raise InputValueError(
                    f"expected {self.record_type.__name__}, got {type(record).__name__}"
                )
        self._records.extend(copy.deepcopy(record) for record in records)

    async def trigger(self) -> BulkResult:
        """Validate, chunk and send every queued record; return the aggregate."""
        aggregator = BulkResponseAggregator()
        pending, invalid = self._validate_records(aggregator)

        if invalid:
            aggregator.merge(ChunkResult.from_invalid_records(invalid))

        if pending:
            chunks = chunkify(pending, self._new_chunk)
            Log.debug(
                f"Bulk {self.kind.name}: {len(pending)} records packed into {len(chunks)} chunks"
            )
            for index, chunk in enumerate(chunks):
                Log.debug(f"Bulk {self.kind.name}: triggering api call for chunk {index}")
                aggregator.merge(await chunk.dispatch())
        elif not invalid:
            aggregator.merge(ChunkResult.empty_success())

        result = aggregator.result
        Log.info(
            f"Bulk {self.kind.name} finished with status {result.status}: "
            f"{result.success}/{result.total} succeeded"
        )
        return result

    def _validate_records(
        self, aggregator: BulkResponseAggregator
    ) -> tuple[list[ValidatedRecord], list[FailedRecord]]:
        pending: list[ValidatedRecord] = []
        invalid: list[FailedRecord] = []
        for record in self._records:
            warnings = record.warnings()
            for warning in warnings:
                Log.warning(warning)
            aggregator.add_warnings(warnings)
            try:
                payload, size = record.get_final_json(self._settings, is_part_of_bulk=True)
            except InputValueError as exc:
                invalid.append(FailedRecord.from_invalid(record.as_json(), exc))
                continue
            pending.append(ValidatedRecord(payload=payload, apparent_size_bytes=size))
        return pending, invalid

    def _new_chunk(self) -> BulkChunk:
        return BulkChunk(self.kind, self._settings, self._transport)


class BulkEvents(BulkCoordinator[Event]):
    record_type = Event
    kind = kinds.EVENTS


class BulkWorkflows(BulkCoordinator[Workflow]):
    record_type = Workflow
    kind = kinds.WORKFLOWS


class BulkWorkflowTrigger(BulkCoordinator[WorkflowTriggerRequest]):
    record_type = WorkflowTriggerRequest
    kind = kinds.WORKFLOW_TRIGGERS


class BulkUsersEdit(BulkCoordinator[UserEdit]):
    record_type = UserEdit
    kind = kinds.IDENTITY_EVENTS

    async def save(self) -> BulkResult:
        """Submit all queued user edits."""
        return await self.trigger()
