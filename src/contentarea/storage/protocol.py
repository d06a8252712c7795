"""Record store protocol for swappable backends.

The storage layer abstracts persistence of records over two stages:
- Draft: the working copy every write goes to
- Live: what ``publish`` copied from draft

Usage:
    store = LocalRecordStore()
    areas = Areas(store=store)
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from contentarea.core.identity import RecordId
from contentarea.core.query import Query
from contentarea.core.types import Stage

T = TypeVar("T")


class StoreError(Exception):
    """Base class for store failures."""


class RecordValidationError(StoreError, ValueError):
    """Raised when a record fails validation on write."""


@runtime_checkable
class RecordStore(Protocol):
    """Abstract store interface. Implementations handle actual data."""

    def write(self, record: Any) -> RecordId:
        """Validate and persist a record to the draft stage.

        Assigns an id to unsaved records (on the passed instance too).

        Raises:
            RecordValidationError: If the record fails validation.
        """
        ...

    def get(
        self, record_type: type[T], record_id: RecordId, stage: Stage = Stage.DRAFT
    ) -> T | None:
        """Fetch one record of ``record_type`` (or a subclass) by id."""
        ...

    def first(self, query: Query) -> Any | None:
        """First record matching the query, in query/natural order."""
        ...

    def all(self, query: Query) -> list[Any]:
        """Every record matching the query, in query/natural order."""
        ...

    def delete(self, record: Any, stage: Stage | None = None) -> bool:
        """Remove a record from one stage, or both when stage is None.

        Returns:
            True if anything was removed.
        """
        ...

    def publish(self, record: Any) -> None:
        """Copy the draft version of a saved record to the live stage."""
        ...
