"""Owner-type registry and decorator.

Usage:
    @area_host(relations=("elemental_area", "sidebar"))
    class Page(ContentRecord):
        elemental_area_id: RecordId | None = None
        sidebar_id: RecordId | None = None

    registry = get_registry()
    for descriptor in registry.candidate_owner_types():
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar, overload

from contentarea.core.record.models import ContentRecord, Record
from contentarea.core.registry.models import OwnerTypeDescriptor, OwnerTypeNotRegisteredError

T = TypeVar("T", bound=type)


class OwnerTypeRegistry:
    """Process-local table mapping type tags to owner-type descriptors.

    Populated once at startup. Iteration follows registration order, which is
    what makes candidate enumeration deterministic.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._by_tag: dict[str, OwnerTypeDescriptor] = {}
        self._by_type: dict[type, OwnerTypeDescriptor] = {}

    def register(
        self,
        cls: type,
        relations: Iterable[str] | None = (),
        hosts_areas: bool = True,
        tag: str | None = None,
    ) -> OwnerTypeDescriptor:
        """Register a record type and return its descriptor.

        Re-registering the same class returns the existing descriptor.

        Args:
            cls: Record class to register.
            relations: Area relation names, or None if the type cannot
                report them.
            hosts_areas: Whether the type is marked as able to host areas.
            tag: Explicit type tag. Defaults to the fully qualified name.

        Returns:
            Descriptor for the registered type.

        Raises:
            TypeError: If cls is not a Record subclass.
            RuntimeError: If the tag is already taken by another class.
        """
        if cls in self._by_type:
            return self._by_type[cls]
        if not (isinstance(cls, type) and issubclass(cls, Record)):
            raise TypeError(f"Owner type {cls!r} must be a Record subclass")

        type_tag = tag or f"{cls.__module__}.{cls.__qualname__}"
        if type_tag in self._by_tag:
            existing = self._by_tag[type_tag].record_type
            raise RuntimeError(f"Owner type tag collision: {cls} and {existing} share {type_tag!r}")

        descriptor = OwnerTypeDescriptor(
            tag=type_tag,
            record_type=cls,
            relations=None if relations is None else tuple(relations),
            hosts_areas=hosts_areas,
        )
        self._by_tag[type_tag] = descriptor
        self._by_type[cls] = descriptor
        cls.__record_tag__ = type_tag  # type: ignore[attr-defined]
        return descriptor

    def get(self, tag: str) -> OwnerTypeDescriptor:
        """Resolve a type tag to its descriptor.

        Raises:
            OwnerTypeNotRegisteredError: If nothing is registered under tag.
        """
        try:
            return self._by_tag[tag]
        except KeyError:
            raise OwnerTypeNotRegisteredError(tag) from None

    def get_descriptor(self, cls: type) -> OwnerTypeDescriptor | None:
        return self._by_type.get(cls)

    def is_registered(self, tag: str) -> bool:
        return tag in self._by_tag

    def __iter__(self) -> Iterator[OwnerTypeDescriptor]:
        return iter(self._by_tag.values())

    def __len__(self) -> int:
        return len(self._by_tag)

    def subtypes_of(self, base: type) -> list[OwnerTypeDescriptor]:
        """Registered descriptors whose record type subclasses ``base``."""
        return [d for d in self if issubclass(d.record_type, base)]

    def candidate_owner_types(self, base: type = ContentRecord) -> list[OwnerTypeDescriptor]:
        """Registered subtypes of ``base`` marked as able to host areas.

        Returns:
            Descriptors in registration order (stable within a process).
        """
        return [d for d in self.subtypes_of(base) if d.hosts_areas]

    def supported_owner_types(self) -> list[str]:
        """Tags of every candidate owner type, in candidate order."""
        return [d.tag for d in self.candidate_owner_types()]


# Module-level registry instance
_registry = OwnerTypeRegistry()


def get_registry() -> OwnerTypeRegistry:
    """Access the global owner-type registry.

    Returns:
        The process-local OwnerTypeRegistry instance.
    """
    return _registry


@overload
def area_host(cls: T) -> T: ...


@overload
def area_host(
    cls: None = None,
    *,
    relations: Iterable[str] = ("elemental_area",),
    tag: str | None = None,
    registry: OwnerTypeRegistry | None = None,
) -> Callable[[T], T]: ...


def area_host(
    cls: T | None = None,
    *,
    relations: Iterable[str] = ("elemental_area",),
    tag: str | None = None,
    registry: OwnerTypeRegistry | None = None,
) -> T | Callable[[T], T]:
    """Register a content record type as able to host areas.

    Supports three forms:
        @area_host                                   # single "elemental_area" relation
        @area_host()                                 # same, parenthesized
        @area_host(relations=("main", "sidebar"))    # several relations

    Args:
        cls: The class to register, or None if called with arguments.
        relations: Area relation names the type exposes.
        tag: Explicit type tag.
        registry: Registry to use instead of the global one.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If the class is not a ContentRecord subclass.
    """
    relation_names = tuple(relations)

    def decorator(c: T) -> T:
        if not issubclass(c, ContentRecord):
            raise TypeError(
                f"Area host {c.__name__} must subclass ContentRecord. "
                f"Did you mean to register it with hosts_areas=False?"
            )
        (registry or _registry).register(c, relations=relation_names, tag=tag)
        return c

    if cls is None:
        return decorator
    return decorator(cls)
