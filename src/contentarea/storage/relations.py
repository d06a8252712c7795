"""Has-many relation lists for an area's elements.

Usage:
    elements = areas.elements(area)
    if isinstance(elements, UnsavedElementList):
        ...  # area not written yet, nothing to query
    for element in elements:
        ...
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterator

from contentarea.core.identity import RecordId
from contentarea.core.query import Query
from contentarea.core.record import Area, BaseElement
from contentarea.core.types import Stage
from contentarea.storage.protocol import RecordStore


class ElementList:
    """Live relation: elements whose ``area_id`` points at a saved area.

    Every iteration queries the store, so results always reflect the stage.

    Args:
        store: Store to query.
        area_id: Id of the owning area.
        element_type: Base element type to match (subclasses included).
        stage: Stage to read from.
    """

    def __init__(
        self,
        store: RecordStore,
        area_id: RecordId,
        element_type: type[BaseElement] = BaseElement,
        stage: Stage = Stage.DRAFT,
    ):
        self._store = store
        self._area_id = area_id
        self._query = Query(element_type).on_stage(stage).where("area_id", area_id).order_by("sort")

    @property
    def query(self) -> Query:
        return self._query

    def __iter__(self) -> Iterator[BaseElement]:
        return iter(self._store.all(self._query))

    def __len__(self) -> int:
        return len(self._store.all(self._query))

    def add(self, element: BaseElement) -> BaseElement:
        """Attach an element to the area and write it."""
        if element.area_id is not None and element.area_id != self._area_id:
            warnings.warn(
                f"Element {element.id} moved from area {element.area_id} to {self._area_id}.",
                stacklevel=2,
            )
        element.area_id = self._area_id
        self._store.write(element)
        return element

    def filter_by(self, callback: Callable[[BaseElement], bool]) -> list[BaseElement]:
        """Elements for which ``callback`` returns True, in stored order."""
        return [element for element in self if callback(element)]


class UnsavedElementList:
    """Elements attached to an area that has not been written yet.

    Holds the area's pending list by reference; nothing is queried.
    """

    def __init__(self, pending: list[BaseElement]):
        self._pending = pending

    def __iter__(self) -> Iterator[BaseElement]:
        return iter(sorted(self._pending, key=lambda e: e.sort))

    def __len__(self) -> int:
        return len(self._pending)

    def add(self, element: BaseElement) -> BaseElement:
        self._pending.append(element)
        return element

    def filter_by(self, callback: Callable[[BaseElement], bool]) -> list[BaseElement]:
        return [element for element in self if callback(element)]


def area_elements(
    store: RecordStore,
    area: Area,
    element_type: type[BaseElement] = BaseElement,
    stage: Stage = Stage.DRAFT,
) -> ElementList | UnsavedElementList:
    """Relation list for an area's elements.

    Returns:
        UnsavedElementList over the pending elements when the area has no id,
        otherwise a live ElementList.
    """
    if area.id is None:
        return UnsavedElementList(area.pending_elements())
    return ElementList(store, area.id, element_type, stage)
