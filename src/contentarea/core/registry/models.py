"""Owner-type registry models."""

from __future__ import annotations

from dataclasses import dataclass

from contentarea.core.record.models import relation_field


class ConfigurationError(RuntimeError):
    """Raised for registration or deployment defects, never for data conditions."""


class OwnerTypeNotRegisteredError(ConfigurationError):
    """Raised when a type tag has no registered descriptor."""

    def __init__(self, tag: str):
        super().__init__(f"No owner type registered under tag {tag!r}")
        self.tag = tag


@dataclass(slots=True, frozen=True)
class OwnerTypeDescriptor:
    """Registered facts about a record type that may own areas.

    Attributes:
        tag: Stable type tag, stored in ``Area.owner_type_hint``.
        record_type: The record class.
        relations: Names of relations pointing at an area, in declaration
            order. None means the type cannot report its relations.
        hosts_areas: Whether the type is marked as able to host areas.
    """

    tag: str
    record_type: type
    relations: tuple[str, ...] | None
    hosts_areas: bool

    @property
    def supports_relations(self) -> bool:
        return self.relations is not None

    def relation_fields(self) -> tuple[str, ...]:
        """Foreign-key field names for every area relation.

        Raises:
            TypeError: If the type does not support relation introspection.
        """
        if self.relations is None:
            raise TypeError(f"Owner type {self.tag!r} does not expose area relations")
        return tuple(relation_field(r) for r in self.relations)
