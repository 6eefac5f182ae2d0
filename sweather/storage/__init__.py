"""Wardrobe persistence for Sweather.

Provides key-value stores and the wardrobe repository built on them.
"""

from .kv_store import JsonFileStore, KeyValueStore, MemoryStore
from .wardrobe_repository import (
    INITIAL_WARDROBE,
    QUOTA_MESSAGE,
    STORAGE_KEY,
    WardrobeRepository,
    get_wardrobe_repository,
    initial_wardrobe,
)

__all__ = [
    "KeyValueStore",
    "JsonFileStore",
    "MemoryStore",
    "WardrobeRepository",
    "get_wardrobe_repository",
    "initial_wardrobe",
    "INITIAL_WARDROBE",
    "QUOTA_MESSAGE",
    "STORAGE_KEY",
]
