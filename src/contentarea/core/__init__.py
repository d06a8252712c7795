"""Core functionalities: stateless models and primitives.

Architecture Note:
    core/ contains records, identities, queries and the owner-type registry.
    These are building blocks with no runtime state beyond the registry table.
    For stateful services, see storage/ and areas/.
"""

from contentarea.core.identity import RecordId
from contentarea.core.permission import ANONYMOUS, Actor, Grant
from contentarea.core.query import Filter, FilterOperator, Query
from contentarea.core.record import (
    Area,
    BaseElement,
    ContentRecord,
    ElementController,
    Record,
    relation_field,
)
from contentarea.core.registry import (
    ConfigurationError,
    OwnerTypeDescriptor,
    OwnerTypeNotRegisteredError,
    OwnerTypeRegistry,
    area_host,
    get_registry,
)
from contentarea.core.types import Capability, Stage

__all__ = [
    # Types
    "Stage",
    "Capability",
    # Identity
    "RecordId",
    # Records
    "Record",
    "ContentRecord",
    "BaseElement",
    "Area",
    "ElementController",
    "relation_field",
    # Permission
    "Actor",
    "Grant",
    "ANONYMOUS",
    # Query
    "Query",
    "Filter",
    "FilterOperator",
    # Registry
    "area_host",
    "get_registry",
    "OwnerTypeRegistry",
    "OwnerTypeDescriptor",
    "ConfigurationError",
    "OwnerTypeNotRegisteredError",
]
