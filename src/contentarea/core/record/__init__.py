"""Record models: areas, elements and hostable content."""

from contentarea.core.record.controller import ElementController
from contentarea.core.record.models import (
    Area,
    BaseElement,
    ContentRecord,
    Record,
    relation_field,
)

__all__ = [
    "Record",
    "ContentRecord",
    "BaseElement",
    "Area",
    "ElementController",
    "relation_field",
]
