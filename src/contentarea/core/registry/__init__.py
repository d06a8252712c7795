"""Owner-type registry: explicit table of types that can host areas."""

from contentarea.core.registry.core import OwnerTypeRegistry, area_host, get_registry
from contentarea.core.registry.models import (
    ConfigurationError,
    OwnerTypeDescriptor,
    OwnerTypeNotRegisteredError,
)

__all__ = [
    # Models
    "OwnerTypeDescriptor",
    "ConfigurationError",
    "OwnerTypeNotRegisteredError",
    # Core
    "OwnerTypeRegistry",
    "area_host",
    "get_registry",
]
