"""Store query models.

Usage:
    # All elements of an area, in stored order
    Query(BaseElement).where("area_id", area.id).order_by("sort")

    # Draft-stage page that hosts an area through a named relation
    Query(Page).on_stage(Stage.DRAFT).where("elemental_area_id", area.id)

    # Exclusions
    Query(Page).where("title", ("Home", "About"), FilterOperator.NIN)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from contentarea.core.types import Stage


class FilterOperator(Enum):
    """Operators for field filtering."""

    EQ = "eq"  # equals
    NE = "ne"  # not equals
    IN = "in"  # in list
    NIN = "nin"  # not in list


@dataclass(frozen=True, slots=True)
class Filter:
    """Single filter condition.

    Attributes:
        field: Record field name to filter on.
        operator: Comparison operator.
        value: Value to compare against.
    """

    field: str
    operator: FilterOperator
    value: Any


@dataclass(frozen=True)
class Query:
    """Declarative store query.

    Immutable - each method returns a new Query instance. Matches instances of
    ``record_type`` and its subclasses.
    """

    record_type: type
    stage: Stage = Stage.DRAFT
    filters: tuple[Filter, ...] = field(default=())
    ordering: tuple[str, ...] = field(default=())

    def on_stage(self, stage: Stage) -> Query:
        """Read from the given storage stage."""
        return Query(self.record_type, stage, self.filters, self.ordering)

    def where(
        self, field_name: str, value: Any, operator: FilterOperator = FilterOperator.EQ
    ) -> Query:
        """Records must also satisfy this condition."""
        condition = Filter(field=field_name, operator=operator, value=value)
        return Query(self.record_type, self.stage, self.filters + (condition,), self.ordering)

    def order_by(self, *field_names: str) -> Query:
        """Sort by these fields; ties keep the store's natural order."""
        return Query(self.record_type, self.stage, self.filters, field_names)

    def fields(self) -> frozenset[str]:
        """All field names this query filters on."""
        return frozenset(f.field for f in self.filters)
