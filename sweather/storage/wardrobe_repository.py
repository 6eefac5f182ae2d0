"""Wardrobe persistence on top of a key-value store.

The whole wardrobe lives under one key as a JSON array of items. Every
mutation reads the current list, changes it, and writes it back in full.
"""

import json
from typing import Callable, Optional

from pydantic import TypeAdapter, ValidationError

from sweather.domain.models import ClothingItem
from sweather.storage.kv_store import JsonFileStore, KeyValueStore
from sweather.utils.config import StorageConfig
from sweather.utils.exceptions import StorageError
from sweather.utils.logger import get_logger

logger = get_logger(__name__)

STORAGE_KEY = "sweather_wardrobe_v1"
QUOTA_MESSAGE = "Storage limit reached. Try deleting some items or using smaller images."

# Seeded on first run so the assistant has something to work with
INITIAL_WARDROBE: tuple[dict, ...] = (
    {
        "id": "1",
        "name": "Favorite Grey Hoodie",
        "type": "Hoodie",
        "insulation": 7,
        "tags": ["casual", "grey", "comfortable"],
        "imageData": "https://picsum.photos/id/1005/300/300",
    },
    {
        "id": "2",
        "name": "Denim Jacket",
        "type": "Jacket",
        "insulation": 6,
        "tags": ["denim", "blue", "layer"],
        "imageData": "https://picsum.photos/id/1025/300/300",
    },
    {
        "id": "3",
        "name": "Winter Coat",
        "type": "Coat",
        "insulation": 10,
        "tags": ["heavy", "winter", "warm"],
        "imageData": "https://picsum.photos/id/1024/300/300",
    },
    {
        "id": "4",
        "name": "Basic White Tee",
        "type": "T-Shirt",
        "insulation": 2,
        "tags": ["white", "basic", "layer"],
        "imageData": "https://picsum.photos/id/1060/300/300",
    },
)

_ITEMS_ADAPTER = TypeAdapter(list[ClothingItem])


def initial_wardrobe() -> list[ClothingItem]:
    """Fresh copies of the demo items."""
    return [ClothingItem.model_validate(data) for data in INITIAL_WARDROBE]


class WardrobeRepository:
    """
    Loads and saves the wardrobe list.

    Storage failures never raise out of this class: reads fall back to an
    empty list, and failed writes are reported through ``notify`` while the
    previously stored value stays in place.

    Usage:
        >>> repo = WardrobeRepository(MemoryStore())
        >>> items = repo.load()          # seeds demo items on first call
        >>> items = repo.remove("1")
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = STORAGE_KEY,
        notify: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            store: Backing key-value store
            key: Key holding the wardrobe array
            notify: Called with a user-facing message when a save fails
        """
        self.store = store
        self.key = key
        self.notify = notify

    def load(self) -> list[ClothingItem]:
        """Return the stored wardrobe, seeding demo items if nothing is stored."""
        try:
            stored = self.store.get_item(self.key)
        except StorageError as e:
            logger.error(f"Failed to load wardrobe: {e}")
            return []

        if not stored:
            items = initial_wardrobe()
            self.save(items)
            logger.info(f"Seeded wardrobe with {len(items)} demo items")
            return items

        try:
            return _ITEMS_ADAPTER.validate_json(stored)
        except ValidationError as e:
            logger.error(f"Failed to load wardrobe: stored value does not parse ({e.error_count()} errors)")
            return []

    def save(self, items: list[ClothingItem]) -> bool:
        """Replace the stored wardrobe with ``items``.

        Returns:
            True if written, False if the write failed and was reported
        """
        value = json.dumps([item.to_wire() for item in items], ensure_ascii=False)

        try:
            self.store.set_item(self.key, value)
        except StorageError as e:
            logger.error(f"Failed to save wardrobe (likely storage limit): {e}")
            if self.notify is not None:
                self.notify(QUOTA_MESSAGE)
            return False

        logger.debug(f"Saved {len(items)} wardrobe items")
        return True

    def add(self, item: ClothingItem) -> list[ClothingItem]:
        """Append an item and return the updated list."""
        updated = [*self.load(), item]
        self.save(updated)
        return updated

    def remove(self, item_id: str) -> list[ClothingItem]:
        """Drop the item with ``item_id`` and return the updated list."""
        updated = [item for item in self.load() if item.id != item_id]
        self.save(updated)
        return updated


def get_wardrobe_repository(
    config: StorageConfig,
    notify: Optional[Callable[[str], None]] = None,
) -> WardrobeRepository:
    """Create a repository backed by the configured JSON file store.

    Args:
        config: Storage configuration
        notify: Callback for user-facing save failure messages

    Returns:
        WardrobeRepository instance
    """
    store = JsonFileStore(config.path, quota_bytes=config.quota_bytes)
    logger.info(f"Wardrobe store: {store.path} (key={config.key})")
    return WardrobeRepository(store, key=config.key, notify=notify)
