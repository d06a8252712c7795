"""Record identity: lightweight, never-reused IDs."""

from contentarea.core.identity.models import RecordId, ReservedRecords

__all__ = [
    "RecordId",
    "ReservedRecords",
]
