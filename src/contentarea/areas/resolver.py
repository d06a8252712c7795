"""Ownership resolution: find the content record that hosts an area.

Resolution runs in two phases:
- Hinted: trust ``area.owner_type_hint`` and scan only that type's relations
- Fallback: with no hint, scan every candidate owner type in registry order

Results are memoized in a LookupCache keyed by the area id. The resolver
never writes: a discovered hint comes back as a HintCorrection for the caller
to persist.

Usage:
    resolver = OwnershipResolver(store, registry, cache)
    resolution = resolver.resolve(area)
    if resolution.correction is not None:
        resolution.correction.apply(area)
        store.write(area)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from contentarea.areas.cache import AREA_RELATION_NAME, OWNER_PAGE, LookupCache, get_lookup_cache
from contentarea.config import AreaSettings
from contentarea.core.identity import RecordId
from contentarea.core.query import Query
from contentarea.core.record import Area, ContentRecord
from contentarea.core.registry import OwnerTypeDescriptor, OwnerTypeRegistry, get_registry
from contentarea.core.types import Stage

if TYPE_CHECKING:
    from contentarea.storage.protocol import RecordStore

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HintCorrection:
    """Owner-type hint discovered by a fallback scan, not yet persisted."""

    area_id: RecordId
    owner_type: str

    def apply(self, area: Area) -> None:
        """Set the discovered hint on the area instance.

        Raises:
            ValueError: If the correction belongs to another area.
        """
        if area.id != self.area_id:
            raise ValueError(f"Correction for area {self.area_id} applied to area {area.id}")
        area.owner_type_hint = self.owner_type


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving an area's owner.

    Attributes:
        owner: The owning record, or None if none was found.
        correction: Hint the caller should persist, if discovery found one.
        relation: Name of the relation the owner hosts the area through.
        from_cache: Whether the owner came from the lookup cache.
    """

    owner: ContentRecord | None
    correction: HintCorrection | None = None
    relation: str | None = None
    from_cache: bool = False

    @property
    def found(self) -> bool:
        return self.owner is not None


class _UnsupportedOwnerType(Exception):
    """Internal signal: a scanned type cannot report its area relations."""


class OwnershipResolver:
    """Resolves and memoizes the owner of an area.

    Args:
        store: Store to query for candidate owners.
        registry: Owner-type registry (default: the global registry).
        cache: Lookup cache (default: the process-wide cache). Pass a
            separate cache per store, since record ids repeat across stores.
        settings: Resolver options (default: loaded from environment).
    """

    def __init__(
        self,
        store: RecordStore,
        registry: OwnerTypeRegistry | None = None,
        cache: LookupCache | None = None,
        settings: AreaSettings | None = None,
    ):
        self._store = store
        self._registry = registry if registry is not None else get_registry()
        self._cache = cache if cache is not None else get_lookup_cache()
        self._settings = settings if settings is not None else AreaSettings()

    @property
    def registry(self) -> OwnerTypeRegistry:
        return self._registry

    @property
    def cache(self) -> LookupCache:
        return self._cache

    def resolve_owner(self, area: Area) -> ContentRecord | None:
        """Owner of the area, or None. Discards any hint correction."""
        return self.resolve(area).owner

    def resolve(self, area: Area) -> Resolution:
        """Find the record that hosts the area.

        Args:
            area: Area to resolve. Unsaved areas never have an owner.

        Returns:
            Resolution with the owner (or None) and any hint correction.

        Raises:
            OwnerTypeNotRegisteredError: If the hint or a candidate names a
                type the registry cannot provide.
        """
        if area.id is None:
            return Resolution(owner=None)

        owner_key = LookupCache.key(OWNER_PAGE, area.id)
        hit, cached = self._cache.lookup(owner_key)
        if hit:
            _LOGGER.debug("Owner of area %s served from cache", area.id)
            relation = self._cache.get(LookupCache.key(AREA_RELATION_NAME, area.id))
            return Resolution(owner=cached, relation=relation, from_cache=True)

        try:
            resolution = self._resolve_uncached(area, area.id)
        except _UnsupportedOwnerType as e:
            _LOGGER.warning("Cannot resolve owner of area %s: %s", area.id, e)
            resolution = Resolution(owner=None)

        if resolution.owner is not None:
            self._cache.set(owner_key, resolution.owner)
            self._cache.set(LookupCache.key(AREA_RELATION_NAME, area.id), resolution.relation)
        elif self._settings.cache_negative_results:
            self._cache.set(owner_key, None)
        return resolution

    def forget(self, area: Area) -> None:
        """Drop cached entries for an area so the next call resolves afresh."""
        if area.id is None:
            return
        self._cache.discard(LookupCache.key(OWNER_PAGE, area.id))
        self._cache.discard(LookupCache.key(AREA_RELATION_NAME, area.id))

    def _resolve_uncached(self, area: Area, area_id: RecordId) -> Resolution:
        if area.owner_type_hint:
            descriptor = self._registry.get(area.owner_type_hint)
            match = self._scan(descriptor, area, self._settings.read_stage)
            if match is not None:
                owner, relation = match
                return Resolution(owner=owner, relation=relation)
            if not self._settings.fallback_on_stale_hint:
                _LOGGER.debug(
                    "No %s hosts area %s; hint trusted, skipping scan",
                    area.owner_type_hint,
                    area.id,
                )
                return Resolution(owner=None)

        _LOGGER.debug("Scanning candidate owner types for area %s", area.id)
        for descriptor in self._registry.candidate_owner_types():
            match = self._scan(descriptor, area, Stage.DRAFT)
            if match is None:
                continue
            owner, relation = match
            correction = None
            if area.owner_type_hint != descriptor.tag:
                correction = HintCorrection(area_id=area_id, owner_type=descriptor.tag)
                _LOGGER.debug("Area %s owner type discovered: %s", area.id, descriptor.tag)
            return Resolution(owner=owner, correction=correction, relation=relation)

        return Resolution(owner=None)

    def _scan(
        self, descriptor: OwnerTypeDescriptor, area: Area, stage: Stage
    ) -> tuple[ContentRecord, str] | None:
        """First record of the type pointing at the area through any relation.

        Raises:
            _UnsupportedOwnerType: If the type cannot report its relations.
        """
        if not descriptor.supports_relations:
            raise _UnsupportedOwnerType(f"{descriptor.tag} does not expose area relations")
        relations = descriptor.relations or ()
        for relation, field_name in zip(relations, descriptor.relation_fields(), strict=True):
            query = Query(descriptor.record_type).on_stage(stage).where(field_name, area.id)
            owner = self._store.first(query)
            if owner is not None:
                return owner, relation
        return None
