"""Permission-filtered element controllers for display.

Usage:
    materializer = ElementMaterializer(store)
    for controller in materializer.visible_element_views(area, actor):
        render(controller)
"""

from __future__ import annotations

from contentarea.core.permission import Actor
from contentarea.core.record import Area, BaseElement, ElementController
from contentarea.core.types import Stage
from contentarea.storage.protocol import RecordStore
from contentarea.storage.relations import UnsavedElementList, area_elements


class ElementMaterializer:
    """Wraps an area's visible elements in their controllers.

    Pure filter and map over the stored element order; nothing is cached.

    Args:
        store: Store holding the elements.
        element_type: Base element type to load (subclasses included).
        stage: Stage to read elements from.
    """

    def __init__(
        self,
        store: RecordStore,
        element_type: type[BaseElement] = BaseElement,
        stage: Stage = Stage.DRAFT,
    ):
        self._store = store
        self._element_type = element_type
        self._stage = stage

    def visible_element_views(self, area: Area, actor: Actor) -> list[ElementController]:
        """Controllers for the elements the actor may view, in stored order.

        Args:
            area: Area whose elements to materialize.
            actor: Acting member.

        Returns:
            Controllers in element order. Empty for an unsaved area, however
            many elements are attached in memory.
        """
        elements = area_elements(self._store, area, self._element_type, self._stage)
        # Don't try to process unsaved lists
        if isinstance(elements, UnsavedElementList):
            return []
        return [element.controller() for element in elements.filter_by(lambda e: e.can_view(actor))]
