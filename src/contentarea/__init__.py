"""contentarea: content-block containers owned by content records.

Usage:
    from contentarea import Areas, Actor, BaseElement, ContentRecord, RecordId, area_host

    @area_host(relations=("elemental_area",))
    class Page(ContentRecord):
        elemental_area_id: RecordId | None = None

    areas = Areas()
    area = areas.create_area(BaseElement(title="Intro"))
    page = Page(title="Home", elemental_area_id=area.id)
    areas.store.write(page)

    areas.owner_page(area)                   # -> page, hint persisted
    areas.can_edit(area, Actor("editor"))    # delegated to page.can_edit
"""

import logging

__version__ = "0.1.0"

# Core primitives
from contentarea.core import (
    ANONYMOUS,
    Actor,
    Area,
    BaseElement,
    Capability,
    ConfigurationError,
    ContentRecord,
    ElementController,
    Grant,
    OwnerTypeNotRegisteredError,
    OwnerTypeRegistry,
    Query,
    RecordId,
    Stage,
    area_host,
    get_registry,
)

# Storage
from contentarea.storage import (
    LocalRecordStore,
    RecordStore,
    RecordValidationError,
    StoreError,
)

# Area services
from contentarea.areas import (
    AccessDelegator,
    Areas,
    Breadcrumb,
    ElementMaterializer,
    LookupCache,
    OwnershipResolver,
    Resolution,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "RecordId",
    "Stage",
    "Capability",
    "Area",
    "BaseElement",
    "ContentRecord",
    "ElementController",
    "Actor",
    "Grant",
    "ANONYMOUS",
    "Query",
    "area_host",
    "get_registry",
    "OwnerTypeRegistry",
    "ConfigurationError",
    "OwnerTypeNotRegisteredError",
    # Storage
    "RecordStore",
    "LocalRecordStore",
    "StoreError",
    "RecordValidationError",
    # Areas
    "Areas",
    "OwnershipResolver",
    "Resolution",
    "LookupCache",
    "AccessDelegator",
    "ElementMaterializer",
    "Breadcrumb",
]
