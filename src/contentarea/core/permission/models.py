"""Actor and grant models used by permission checks.

Usage:
    editor = Actor("editor", grants=frozenset({Grant("app.Page", page.id, Capability.EDIT)}))
    admin = Actor("admin", is_admin=True)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from contentarea.core.identity import RecordId
from contentarea.core.types import Capability

if TYPE_CHECKING:
    from contentarea.core.record import Record


@dataclass(frozen=True, slots=True)
class Grant:
    """Explicit capability on one record, keyed by type tag and id."""

    record_tag: str
    record_id: RecordId
    capability: Capability


@dataclass(frozen=True, slots=True)
class Actor:
    """The member on whose behalf a request runs.

    Attributes:
        name: Display/login name.
        is_admin: Superuser override; passes every base check.
        grants: Explicit per-record grants.
    """

    name: str
    is_admin: bool = False
    grants: frozenset[Grant] = field(default_factory=frozenset)

    def has_grant(self, record: Record, capability: Capability) -> bool:
        """Check for an explicit grant on a saved record."""
        if record.id is None:
            return False
        return Grant(record.record_tag(), record.id, capability) in self.grants


ANONYMOUS = Actor("anonymous")
