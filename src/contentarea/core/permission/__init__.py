"""Permission primitives: actors and explicit grants."""

from contentarea.core.permission.models import ANONYMOUS, Actor, Grant

__all__ = [
    "ANONYMOUS",
    "Actor",
    "Grant",
]
