"""Area permission checks delegated to the owning record.

Usage:
    delegator = AccessDelegator(resolver.resolve_owner)
    if delegator.can_edit(area, actor):
        ...

An area has no permissions of its own beyond the store-level base check
(superuser or explicit grant). Everything else is answered by whichever
record owns it; an area nobody owns is denied.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from contentarea.config import AreaSettings
from contentarea.core.permission import Actor
from contentarea.core.record import Area, ContentRecord, Record
from contentarea.core.types import Capability

_LOGGER = logging.getLogger(__name__)

OwnerLookup = Callable[[Area], ContentRecord | None]


@runtime_checkable
class PermissionChecker(Protocol):
    """Ownership-independent permission check on a single record."""

    def base_can(self, actor: Actor, record: Record, capability: Capability) -> bool:
        """Whether the actor holds the capability on the record directly."""
        ...


class GrantPermissions:
    """Base check from the actor itself: superuser override or explicit grant."""

    def base_can(self, actor: Actor, record: Record, capability: Capability) -> bool:
        return actor.is_admin or actor.has_grant(record, capability)


class AccessDelegator:
    """Answers view/edit checks for areas by delegating to their owner.

    Args:
        owner_lookup: Callable returning the area's owner or None.
        permissions: Base permission check (default: GrantPermissions).
        settings: Delegation options (default: loaded from environment).
    """

    def __init__(
        self,
        owner_lookup: OwnerLookup,
        permissions: PermissionChecker | None = None,
        settings: AreaSettings | None = None,
    ):
        self._owner_lookup = owner_lookup
        self._permissions = permissions if permissions is not None else GrantPermissions()
        self._settings = settings if settings is not None else AreaSettings()

    def can_edit(self, area: Area, actor: Actor) -> bool:
        """Whether the actor may edit the area.

        Args:
            area: Area to check.
            actor: Acting member.

        Returns:
            True on a base edit grant, otherwise the owner's answer, otherwise
            False when no owner resolves.
        """
        if self._permissions.base_can(actor, area, Capability.EDIT):
            return True
        return self._delegate(area, actor, Capability.EDIT)

    def can_view(self, area: Area, actor: Actor) -> bool:
        """Whether the actor may view the area.

        The short-circuit tests the *edit* base check
        unless ``view_uses_edit_base_check`` is turned off.
        """
        base = Capability.EDIT if self._settings.view_uses_edit_base_check else Capability.VIEW
        if self._permissions.base_can(actor, area, base):
            return True
        return self._delegate(area, actor, Capability.VIEW)

    def _delegate(self, area: Area, actor: Actor, capability: Capability) -> bool:
        owner = self._owner_lookup(area)
        if owner is None:
            _LOGGER.debug(
                "Area %s has no owner; denying %s to %s", area.id, capability.value, actor.name
            )
            return False
        if capability is Capability.EDIT:
            allowed = owner.can_edit(actor)
        else:
            allowed = owner.can_view(actor)
        _LOGGER.debug(
            "Area %s %s for %s delegated to %s %s: %s",
            area.id,
            capability.value,
            actor.name,
            owner.record_tag(),
            owner.id,
            allowed,
        )
        return allowed
