"""Storage backends and relation lists."""

from contentarea.storage.allocator import RecordIdAllocator
from contentarea.storage.local import LocalRecordStore
from contentarea.storage.protocol import RecordStore, RecordValidationError, StoreError
from contentarea.storage.relations import ElementList, UnsavedElementList, area_elements

__all__ = [
    "RecordStore",
    "LocalRecordStore",
    "RecordIdAllocator",
    "StoreError",
    "RecordValidationError",
    "ElementList",
    "UnsavedElementList",
    "area_elements",
]
