"""
Key-value stores holding string values under string keys.

Mirrors the browser local-storage contract the wardrobe was designed
around: whole values are replaced on every write, and a write that would
exceed the quota fails without changing what is stored.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from sweather.utils.exceptions import StorageCorruptError, StorageError, StorageQuotaExceededError
from sweather.utils.logger import get_logger

logger = get_logger(__name__)


def _serialized_size(data: Dict[str, str]) -> int:
    return len(json.dumps(data, ensure_ascii=False).encode("utf-8"))


class KeyValueStore(ABC):
    """
    Abstract base class for key-value stores.

    Values are opaque strings; callers do their own serialization.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key.

        Returns:
            The stored string, or None if the key is absent.
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Args:
            key: Storage key.
            value: String value.

        Raises:
            StorageQuotaExceededError: If the store would exceed its quota.
            StorageError: If the write fails for another reason.
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a key if present."""
        pass


class MemoryStore(KeyValueStore):
    """In-process store with optional byte quota."""

    def __init__(self, quota_bytes: Optional[int] = None):
        self.quota_bytes = quota_bytes
        self._data: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        candidate = dict(self._data)
        candidate[key] = value

        if self.quota_bytes is not None:
            size = _serialized_size(candidate)
            if size > self.quota_bytes:
                raise StorageQuotaExceededError(
                    f"Writing '{key}' would use {size} bytes (quota {self.quota_bytes})",
                    key=key,
                    size=size,
                    quota=self.quota_bytes,
                )

        self._data = candidate

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Store persisted as a single JSON object file.

    Each write serializes the whole mapping to a temporary file in the same
    directory and moves it over the target, so the previous file survives
    any failed write.
    """

    def __init__(self, path: Path | str, quota_bytes: Optional[int] = None):
        self.path = Path(path)
        self.quota_bytes = quota_bytes

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageCorruptError(f"Store file is not valid JSON: {e}", path=str(self.path)) from e
        except OSError as e:
            raise StorageError(f"Failed to read store file: {e}", context={"path": str(self.path)}) from e

        if not isinstance(data, dict):
            raise StorageCorruptError("Store file must contain a JSON object", path=str(self.path))

        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write store file: {e}", context={"path": str(self.path)}) from e

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageCorruptError(f"Value under '{key}' is not a string", path=str(self.path))
        return value

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        if self.quota_bytes is not None:
            size = _serialized_size(data)
            if size > self.quota_bytes:
                raise StorageQuotaExceededError(
                    f"Writing '{key}' would use {size} bytes (quota {self.quota_bytes})",
                    key=key,
                    size=size,
                    quota=self.quota_bytes,
                )

        self._write_all(data)
        logger.debug(f"Wrote '{key}' to {self.path}")

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
