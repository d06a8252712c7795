"""Areas: central coordinator for areas, their elements and their owners.

Usage:
    areas = Areas()

    # Create an area and attach elements
    area = areas.create_area()
    areas.add_element(area, TextElement(title="Intro"))

    # Ownership and permissions
    page = areas.owner_page(area)
    if areas.can_edit(area, actor):
        ...

    # Display
    controllers = areas.element_controllers(area, actor)
    html = areas.for_template(area, renderer, actor)

    # Lifecycle with cascades
    copy = areas.duplicate(area)
    areas.publish(area)
    areas.delete(area)
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from contentarea.areas.access import AccessDelegator, PermissionChecker
from contentarea.areas.cache import LookupCache
from contentarea.areas.display import (
    Breadcrumb,
    TemplateRenderer,
    summary_columns,
    template_name_for,
)
from contentarea.areas.materializer import ElementMaterializer
from contentarea.areas.resolver import HintCorrection, OwnershipResolver
from contentarea.config import AreaSettings
from contentarea.core.identity import RecordId
from contentarea.core.permission import ANONYMOUS, Actor
from contentarea.core.record import Area, BaseElement, ContentRecord, ElementController
from contentarea.core.registry import ConfigurationError, OwnerTypeRegistry
from contentarea.core.types import Stage
from contentarea.storage.local import LocalRecordStore
from contentarea.storage.protocol import RecordStore, StoreError
from contentarea.storage.relations import ElementList, UnsavedElementList, area_elements

_LOGGER = logging.getLogger(__name__)


class Areas:
    """Area lifecycle, ownership, access and display coordinator.

    Owns the store and wires the ownership resolver, access delegator and
    element materializer together. This is the layer that persists hint
    corrections, so it is also where store errors surface.

    Each coordinator gets its own lookup cache unless one is passed in.
    Share a cache only between coordinators over the same store.
    """

    def __init__(
        self,
        store: RecordStore | None = None,
        registry: OwnerTypeRegistry | None = None,
        cache: LookupCache | None = None,
        permissions: PermissionChecker | None = None,
        settings: AreaSettings | None = None,
        element_type: type[BaseElement] = BaseElement,
    ):
        self._store = store if store is not None else LocalRecordStore()
        self._settings = settings if settings is not None else AreaSettings()
        self._element_type = element_type
        if cache is None:
            # Ids are only unique within one store
            lock = threading.RLock() if self._settings.thread_safe_cache else None
            cache = LookupCache(lock)
        self._resolver = OwnershipResolver(self._store, registry, cache, self._settings)
        self._access = AccessDelegator(self.owner_page, permissions, self._settings)
        self._materializer = ElementMaterializer(self._store, element_type)

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def resolver(self) -> OwnershipResolver:
        return self._resolver

    # Persistence

    def create_area(self, *elements: BaseElement) -> Area:
        """Create and save an area, attaching the given elements in order."""
        area = Area()
        for sort, element in enumerate(elements, start=1):
            if not element.sort:
                element.sort = sort
            area.pending_elements().append(element)
        self.save(area)
        return area

    def save(self, area: Area) -> RecordId:
        """Write the area; on first save also write its pending elements."""
        is_new = area.id is None
        record_id = self._store.write(area)
        if is_new:
            pending = list(area.pending_elements())
            area.pending_elements().clear()
            live = self.elements(area)
            for element in pending:
                live.add(element)
        return record_id

    def elements(self, area: Area, stage: Stage = Stage.DRAFT) -> ElementList | UnsavedElementList:
        return area_elements(self._store, area, self._element_type, stage)

    def add_element(self, area: Area, element: BaseElement) -> BaseElement:
        """Attach an element; saved areas write it immediately."""
        return self.elements(area).add(element)

    # Ownership

    def owner_page(self, area: Area) -> ContentRecord | None:
        """Resolve the area's owner, persisting any discovered hint.

        Raises:
            RecordValidationError: If writing the corrected hint fails. The
                area's hint is restored and its cache entries dropped, so the
                next call repeats discovery.
            OwnerTypeNotRegisteredError: If the hint names an unknown type.
        """
        resolution = self._resolver.resolve(area)
        if resolution.correction is not None:
            self._apply_correction(area, resolution.correction)
        return resolution.owner

    def _apply_correction(self, area: Area, correction: HintCorrection) -> None:
        previous = area.owner_type_hint
        correction.apply(area)
        try:
            self._store.write(area)
        except StoreError:
            area.owner_type_hint = previous
            self._resolver.forget(area)
            raise
        _LOGGER.debug("Persisted owner type hint %s on area %s", correction.owner_type, area.id)

    def forget(self, area: Area) -> None:
        """Drop the cached owner of an area.

        Call after writing a record that now points at an already resolved
        area; otherwise a cached "no owner" answer is served until then.
        """
        self._resolver.forget(area)

    # Access

    def can_edit(self, area: Area, actor: Actor) -> bool:
        return self._access.can_edit(area, actor)

    def can_view(self, area: Area, actor: Actor) -> bool:
        return self._access.can_view(area, actor)

    # Display

    def element_controllers(self, area: Area, actor: Actor) -> list[ElementController]:
        """Controllers for the elements the actor may view, in order."""
        return self._materializer.visible_element_views(area, actor)

    def breadcrumbs(self, area: Area) -> Breadcrumb | None:
        """Link to the owner's edit screen, or None when nothing owns the area."""
        return Breadcrumb.for_owner(self.owner_page(area))

    def summary(self, area: Area) -> dict[str, Any]:
        """Summary columns for listing UIs (``{"Title": Breadcrumb | None}``)."""
        return summary_columns(area, {"breadcrumbs": self.breadcrumbs(area)})

    def for_template(self, area: Area, renderer: TemplateRenderer, actor: Actor = ANONYMOUS) -> str:
        """Render the area through its name-based template."""
        context = {"area": area, "elements": self.element_controllers(area, actor)}
        return renderer.render(template_name_for(area), context)

    # Lifecycle

    def _relation(self, area: Area, name: str, stage: Stage) -> ElementList | UnsavedElementList:
        if name != "elements":
            raise ConfigurationError(f"{type(area).__name__} declares unknown relation {name!r}")
        return self.elements(area, stage)

    def delete(self, area: Area) -> bool:
        """Delete the area from both stages, cascading to its elements.

        Returns:
            True if the area was stored on any stage.
        """
        if area.id is None:
            area.pending_elements().clear()
            return False
        for relation in area.cascade_deletes:
            for stage in Stage:
                for record in self._relation(area, relation, stage):
                    self._store.delete(record, stage)
        self._resolver.forget(area)
        return self._store.delete(area)

    def duplicate(self, area: Area) -> Area:
        """Copy the area and, cascading, its elements. Copies get new ids.

        Raises:
            StoreError: If the area has not been saved.
        """
        if area.id is None:
            raise StoreError("Cannot duplicate an unsaved area")
        clone = type(area).model_validate(area.model_dump(exclude={"id"}))
        self._store.write(clone)
        for relation in area.cascade_duplicates:
            for record in self._relation(area, relation, Stage.DRAFT):
                self._store.write(record.model_copy(update={"id": None, "area_id": clone.id}))
        return clone

    def publish(self, area: Area) -> None:
        """Publish the area and the records it owns.

        Owned records that were removed from draft are removed from live too.

        Raises:
            StoreError: If the area has no draft version.
        """
        self._store.publish(area)
        for relation in area.owns:
            published: set[RecordId] = set()
            for record in self._relation(area, relation, Stage.DRAFT):
                self._store.publish(record)
                published.add(record.id)  # type: ignore[arg-type]
            for record in self._relation(area, relation, Stage.LIVE):
                if record.id not in published:
                    self._store.delete(record, Stage.LIVE)
