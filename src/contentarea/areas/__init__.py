"""Area services: ownership resolution, access delegation and display."""

from contentarea.areas.access import AccessDelegator, GrantPermissions, PermissionChecker
from contentarea.areas.cache import LookupCache, get_lookup_cache
from contentarea.areas.display import Breadcrumb, TemplateRenderer
from contentarea.areas.manager import Areas
from contentarea.areas.materializer import ElementMaterializer
from contentarea.areas.resolver import HintCorrection, OwnershipResolver, Resolution

__all__ = [
    # Coordinator
    "Areas",
    # Ownership
    "OwnershipResolver",
    "Resolution",
    "HintCorrection",
    "LookupCache",
    "get_lookup_cache",
    # Access
    "AccessDelegator",
    "PermissionChecker",
    "GrantPermissions",
    # Display
    "ElementMaterializer",
    "Breadcrumb",
    "TemplateRenderer",
]
