"""Tests for record identity allocation.

Critical Invariants:
- IDs are never reused, not even after deletion
- Reserved indices are never handed out
- Retiring only works for IDs this allocator issued
"""

import pytest

from contentarea.core.identity import RecordId, ReservedRecords
from contentarea.storage.allocator import RecordIdAllocator


@pytest.fixture
def allocator():
    """Create a fresh RecordIdAllocator."""
    return RecordIdAllocator()


def test_ids_are_never_reused_after_retire(allocator):
    """CRITICAL: A retired ID must not come back from allocate().

    Why: Areas are cached by id; reuse would serve a deleted area's owner.
    """
    first = allocator.allocate()
    allocator.retire(first)

    second = allocator.allocate()
    assert second != first, "INVARIANT: identity never reused"
    assert not allocator.is_alive(first)
    assert allocator.is_alive(second)


def test_allocated_ids_skip_reserved_range(allocator):
    """CRITICAL: First allocated index >= _RESERVED_COUNT.

    Why: Index 0 stands for "no record" in relation fields.
    """
    record_id = allocator.allocate()

    assert record_id.index >= ReservedRecords._RESERVED_COUNT


def test_start_below_reserved_range_is_clamped():
    allocator = RecordIdAllocator(start=0)
    assert allocator.allocate().index == ReservedRecords._RESERVED_COUNT


def test_negative_start_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        RecordIdAllocator(start=-1)


def test_cannot_retire_foreign_id(allocator):
    """Retiring an ID from another allocator is a programming error."""
    with pytest.raises(ValueError, match="Cannot retire unallocated"):
        allocator.retire(RecordId(index=10_000))


def test_record_id_is_hashable_value():
    """Equal ids collapse in sets and dict keys (cache keys depend on it)."""
    assert len({RecordId(5), RecordId(5), RecordId(6)}) == 2
    assert str(RecordId(7)) == "7"
