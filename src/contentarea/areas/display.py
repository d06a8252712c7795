"""Display contracts: breadcrumbs, summary columns and template rendering.

Usage:
    crumb = Breadcrumb.for_owner(owner)
    crumb.to_html()  # '<a href="/admin/pages/edit/show/3">Home</a>'
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from contentarea.core.record import Area, ContentRecord


@dataclass(frozen=True, slots=True)
class Breadcrumb:
    """Anchor-like label pointing at the record that owns an area."""

    link: str
    text: str

    @classmethod
    def for_owner(cls, owner: ContentRecord | None) -> Breadcrumb | None:
        if owner is None:
            return None
        return cls(link=owner.edit_link(), text=owner.title)

    def to_html(self) -> str:
        return f'<a href="{html.escape(self.link)}">{html.escape(self.text)}</a>'

    def __str__(self) -> str:
        return self.to_html()


@runtime_checkable
class TemplateRenderer(Protocol):
    """Renders a named template with a context."""

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render ``template_name`` and return the markup."""
        ...


def template_name_for(area: Area) -> str:
    """Template looked up for an area: ``<package>/<Type>``."""
    package = type(area).__module__.split(".")[0]
    return f"{package}/{type(area).__name__}"


def summary_columns(area: Area, values: dict[str, Any]) -> dict[str, Any]:
    """Map the area's summary field labels to already computed values.

    Args:
        area: Area whose ``summary_fields`` define the columns.
        values: Computed value per source name (e.g. ``{"breadcrumbs": ...}``).

    Returns:
        Column label -> value, in summary field order. Missing sources map
        to None.
    """
    return {label: values.get(source) for label, source in area.summary_fields.items()}
