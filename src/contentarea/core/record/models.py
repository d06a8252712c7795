"""Record models: the persistable shapes the store works with.

Records are pydantic models so the store can re-validate them on every write.
Relation fields follow the ``<relation>_id`` naming convention.

Usage:
    class Page(ContentRecord):
        elemental_area_id: RecordId | None = None

    area = Area()
    store.write(area)
    page = Page(title="Home", elemental_area_id=area.id)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, Field, PrivateAttr

from contentarea.core.identity import RecordId
from contentarea.core.record.controller import ElementController
from contentarea.core.types import Capability

if TYPE_CHECKING:
    from contentarea.core.permission import Actor


def relation_field(relation: str) -> str:
    """Foreign-key field name for a named relation."""
    return f"{relation}_id"


class Record(BaseModel):
    """Base persistable record. ``id`` is None until the store writes it."""

    id: RecordId | None = None

    @classmethod
    def record_tag(cls) -> str:
        """Type tag: the registered tag, or the fully qualified class name.

        Only a tag registered on this exact class counts; subclasses do not
        inherit their parent's tag.
        """
        tag = cls.__dict__.get("__record_tag__")
        if tag is not None:
            return str(tag)
        return f"{cls.__module__}.{cls.__qualname__}"

    def is_saved(self) -> bool:
        return self.id is not None


class ContentRecord(Record):
    """Base type for content that can host areas and be permission-checked."""

    title: str = ""

    def can_edit(self, actor: Actor) -> bool:
        """Superusers and actors with an explicit edit grant may edit."""
        return actor.is_admin or actor.has_grant(self, Capability.EDIT)

    def can_view(self, actor: Actor) -> bool:
        """Editors may view; otherwise an explicit view grant is required."""
        return self.can_edit(actor) or actor.has_grant(self, Capability.VIEW)

    def edit_link(self) -> str:
        if self.id is None:
            return ""
        return f"/admin/pages/edit/show/{self.id}"


class BaseElement(ContentRecord):
    """A content block belonging to an area."""

    area_id: RecordId | None = None
    sort: int = 0

    def controller(self) -> ElementController:
        return ElementController(self)


class Area(Record):
    """Container holding an ordered collection of elements.

    ``owner_type_hint`` caches the tag of the owning record's type. It is an
    optimization only and may be empty, stale or wrong.
    """

    owner_type_hint: str = Field(default="", max_length=255)

    cascade_deletes: ClassVar[tuple[str, ...]] = ("elements",)
    cascade_duplicates: ClassVar[tuple[str, ...]] = ("elements",)
    owns: ClassVar[tuple[str, ...]] = ("elements",)
    summary_fields: ClassVar[dict[str, str]] = {"Title": "breadcrumbs"}

    # Elements attached before the area has an id; written on first save.
    _pending_elements: list[BaseElement] = PrivateAttr(default_factory=list)

    def pending_elements(self) -> list[BaseElement]:
        """Elements attached in memory, by reference. Empty once saved."""
        return self._pending_elements
