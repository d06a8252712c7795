"""Query evaluation helpers shared by store implementations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from contentarea.core.query.models import Filter, FilterOperator, Query

_MISSING = object()


def filter_matches(record: Any, condition: Filter) -> bool:
    """Check a single filter condition against a record.

    A record without the filtered field never matches, whatever the operator.

    Args:
        record: Record instance to test.
        condition: Filter condition.

    Returns:
        True if the record satisfies the condition.

    Raises:
        TypeError: If IN/NIN is used with a non-iterable value.
    """
    actual = getattr(record, condition.field, _MISSING)
    if actual is _MISSING:
        return False
    op = condition.operator
    if op is FilterOperator.EQ:
        return bool(actual == condition.value)
    if op is FilterOperator.NE:
        return bool(actual != condition.value)
    if not isinstance(condition.value, Iterable) or isinstance(condition.value, str):
        raise TypeError(f"{op.name} filter on {condition.field!r} needs a list of values")
    if op is FilterOperator.IN:
        return actual in condition.value
    return actual not in condition.value


def query_matches(record: Any, query: Query) -> bool:
    """Check if a record is of the queried type and satisfies every filter."""
    return isinstance(record, query.record_type) and all(
        filter_matches(record, f) for f in query.filters
    )


def sort_records(records: list[Any], query: Query) -> list[Any]:
    """Apply the query ordering. Stable, so ties keep natural order."""
    result = list(records)
    for field_name in reversed(query.ordering):
        result.sort(key=lambda r, name=field_name: getattr(r, name))
    return result
