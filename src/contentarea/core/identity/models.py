"""Record identity models.

Usage:
    record_id = RecordId(index=1042)
    unsaved = Area()          # id is None until the store writes it
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecordId:
    """Stable record identifier assigned by the store on first write.

    Identities are never recycled: a deleted record's index is retired, so a
    stale reference can never resolve to a different record.
    """

    index: int = 0

    def __hash__(self) -> int:
        return hash(self.index)

    def __str__(self) -> str:
        return str(self.index)


class ReservedRecords:
    """Indices below this bound are never handed out by an allocator."""

    _RESERVED_COUNT = 1  # index 0 means "no record" in foreign-key columns
