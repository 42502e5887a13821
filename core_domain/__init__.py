"""Shared domain layer for the Functional Age and Brain Age flows.

Base models, scoring helpers (clamping, total lookups, driver ranking),
local key-value storage, immutable session helpers and JSON export.
"""

from .models import DriverScore, EntropyModel, SessionRecord, SkipMarker, TopDriver
from .storage import (
    FileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
    get_default_storage,
    set_default_storage,
)
from .export import build_export, parse_export

__all__ = [
    "EntropyModel",
    "SkipMarker",
    "DriverScore",
    "TopDriver",
    "SessionRecord",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "FileKeyValueStore",
    "get_default_storage",
    "set_default_storage",
    "build_export",
    "parse_export",
]
