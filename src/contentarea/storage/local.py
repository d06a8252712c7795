"""Local in-memory record store.

Simple dict-based storage suitable for single-process use and testing.
Natural order is id order, which is write order for new records.

Usage:
    store = LocalRecordStore()
    areas = Areas(store=store)
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from contentarea.core.identity import RecordId
from contentarea.core.query import Query, query_matches, sort_records
from contentarea.core.types import Stage
from contentarea.storage.allocator import RecordIdAllocator
from contentarea.storage.protocol import RecordValidationError, StoreError

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


class LocalRecordStore:
    """In-memory two-stage store using nested dicts.

    Structure:
        _stages[stage][record_id] = record_instance

    Records are deep-copied on the way in and, by default, on the way out so
    callers can never mutate stored state by accident.
    """

    def __init__(self, allocator: RecordIdAllocator | None = None):
        """Initialize local store.

        Args:
            allocator: ID allocator (default: a fresh RecordIdAllocator).
        """
        self._allocator = allocator or RecordIdAllocator()
        self._stages: dict[Stage, dict[RecordId, BaseModel]] = {stage: {} for stage in Stage}

    def _validate(self, record: Any) -> None:
        if not isinstance(record, BaseModel):
            raise StoreError(f"Cannot store {type(record).__name__}: not a pydantic model")
        try:
            type(record).model_validate(record.model_dump())
        except ValidationError as e:
            name = type(record).__name__
            raise RecordValidationError(f"{name} {record.id} failed validation: {e}") from e

    def write(self, record: Any) -> RecordId:
        """Validate and store a record on the draft stage.

        Args:
            record: Record to store. Unsaved records get an id assigned.

        Returns:
            The record's id.

        Raises:
            RecordValidationError: If the record fails validation. Nothing is
                stored and no id is assigned.
        """
        self._validate(record)
        if record.id is None:
            record.id = self._allocator.allocate()
            _LOGGER.debug("Allocated %s for new %s", record.id, type(record).__name__)
        elif not self._allocator.is_alive(record.id):
            raise StoreError(f"Record id {record.id} was never allocated or has been deleted")
        self._stages[Stage.DRAFT][record.id] = record.model_copy(deep=True)
        return record.id  # type: ignore[no-any-return]

    def get(
        self,
        record_type: type[T],
        record_id: RecordId,
        stage: Stage = Stage.DRAFT,
        copy: bool = True,
    ) -> T | None:
        """Get a record by id.

        Args:
            record_type: Expected type; subclasses match too.
            record_id: Id to look up.
            stage: Stage to read from.
            copy: Whether to return a copy (default True).

        Returns:
            The record, or None if absent or of another type.
        """
        record = self._stages[stage].get(record_id)
        if record is None or not isinstance(record, record_type):
            return None
        return record.model_copy(deep=True) if copy else record  # type: ignore[return-value]

    def all(self, query: Query, copy: bool = True) -> list[Any]:
        """Find every record matching the query.

        O(n) scan over the stage.

        Args:
            query: Store query.
            copy: Whether to return copies (default True).

        Returns:
            Matching records, ordered by the query ordering then by id.
        """
        stage = self._stages[query.stage]
        ordered = sorted(stage, key=lambda r: r.index)
        matches = [stage[rid] for rid in ordered if query_matches(stage[rid], query)]
        matches = sort_records(matches, query)
        if copy:
            return [r.model_copy(deep=True) for r in matches]
        return matches

    def first(self, query: Query, copy: bool = True) -> Any | None:
        """First record matching the query, or None."""
        matches = self.all(query, copy=False)
        if not matches:
            return None
        return matches[0].model_copy(deep=True) if copy else matches[0]

    def delete(self, record: Any, stage: Stage | None = None) -> bool:
        """Delete a record from one stage or from both.

        Deleting from both stages retires the id for good.

        Args:
            record: Record to delete.
            stage: Stage to delete from (default: both).

        Returns:
            True if the record was present on any affected stage.
        """
        if record.id is None:
            return False
        stages = list(Stage) if stage is None else [stage]
        removed = False
        for s in stages:
            removed = self._stages[s].pop(record.id, None) is not None or removed
        still_stored = any(record.id in self._stages[s] for s in Stage)
        if not still_stored and self._allocator.is_alive(record.id):
            self._allocator.retire(record.id)
        return removed

    def publish(self, record: Any) -> None:
        """Copy the draft version of a record to the live stage.

        Raises:
            StoreError: If the record has no draft version.
        """
        draft = self._stages[Stage.DRAFT].get(record.id) if record.id is not None else None
        if draft is None:
            raise StoreError(f"Cannot publish {type(record).__name__}: no draft version")
        self._stages[Stage.LIVE][record.id] = draft.model_copy(deep=True)

    def count(self, stage: Stage = Stage.DRAFT) -> int:
        """Number of records on a stage."""
        return len(self._stages[stage])
