"""Record ID allocation service.

RecordIdAllocator is a stateful service that hands out record identities.
"""

from __future__ import annotations

from contentarea.core.identity import RecordId, ReservedRecords


class RecordIdAllocator:
    """Allocates monotonically increasing record IDs.

    Unlike a recycling allocator there is no free list: once an index has been
    handed out it is retired for the lifetime of the allocator, even after the
    record is deleted. Starts allocation after the reserved range.
    """

    def __init__(self, start: int = ReservedRecords._RESERVED_COUNT):
        """Initialize the allocator.

        Args:
            start: First index to hand out (clamped to the reserved range).

        Raises:
            ValueError: If start is negative.
        """
        if start < 0:
            raise ValueError(f"Allocator start must be non-negative, got {start}")
        self._next_index = max(start, ReservedRecords._RESERVED_COUNT)
        self._retired: set[int] = set()

    def allocate(self) -> RecordId:
        """Allocate a fresh record ID.

        Returns:
            Newly allocated RecordId, never equal to any previously returned.
        """
        index = self._next_index
        self._next_index += 1
        return RecordId(index=index)

    def retire(self, record_id: RecordId) -> None:
        """Mark an ID as belonging to a deleted record.

        Args:
            record_id: ID of the deleted record.

        Raises:
            ValueError: If the ID was never allocated here.
        """
        if not self.was_allocated(record_id):
            raise ValueError(f"Cannot retire unallocated record id {record_id.index}")
        self._retired.add(record_id.index)

    def was_allocated(self, record_id: RecordId) -> bool:
        """Check if this allocator handed out the given ID."""
        return ReservedRecords._RESERVED_COUNT <= record_id.index < self._next_index

    def is_alive(self, record_id: RecordId) -> bool:
        """Check if the ID was allocated here and its record not deleted."""
        return self.was_allocated(record_id) and record_id.index not in self._retired

