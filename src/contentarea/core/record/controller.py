"""Presentation wrapper around a single content element."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contentarea.core.identity import RecordId
    from contentarea.core.record.models import BaseElement


@dataclass(slots=True)
class ElementController:
    """Wraps an element for display, keeping form/action logic off the record.

    Attributes:
        element: The wrapped element record.
    """

    element: BaseElement

    @property
    def record_id(self) -> RecordId | None:
        return self.element.id

    def template_name(self) -> str:
        """Name of the template the element renders with."""
        return f"elements/{type(self.element).__name__}"
