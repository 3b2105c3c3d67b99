"""Key-value storage port and JSON helpers shared by the stores."""

import json
import logging
from typing import Protocol

from leftover_chef.domain.errors import (
    PersistenceReadCorruption,
    PersistenceReadFailure,
)

HISTORY_KEY = "leftover_chef.v1.history"
FAVORITES_KEY = "leftover_chef.v1.favorites"
PREFERENCES_KEY = "leftover_chef.v1.preferences"
ALL_KEYS = (HISTORY_KEY, FAVORITES_KEY, PREFERENCES_KEY)

_logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Byte-string storage addressed by fixed key names."""

    def get(self, key: str) -> bytes | None:
        """Return the stored value for a key, if any."""

    def set(self, key: str, value: bytes) -> bool:
        """Store a value and return True on success."""

    def delete(self, key: str) -> None:
        """Remove a key if it exists."""


def read_value(storage: KeyValueStorage, key: str) -> bytes | None:
    """Fetch a raw value, raising ``PersistenceReadFailure`` when storage fails."""
    try:
        return storage.get(key)
    except PersistenceReadFailure:
        raise
    except Exception as exc:
        raise PersistenceReadFailure(f"could not read {key}: {exc}") from exc


def delete_value(storage: KeyValueStorage, key: str) -> bool:
    """Remove a key, returning False when the delete fails."""
    try:
        storage.delete(key)
    except Exception as exc:
        _logger.error("Failed to delete %s: %s", key, exc)
        return False
    return True


def decode_json(raw: bytes) -> object:
    """Decode a stored JSON document."""
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PersistenceReadCorruption(str(exc)) from exc


def load_json(storage: KeyValueStorage, key: str, default: object) -> object:
    """Return the decoded value at a key, or ``default`` when missing or corrupt.

    Raises ``PersistenceReadFailure`` when the storage itself cannot be read,
    so callers never overwrite data they failed to load.
    """
    raw = read_value(storage, key)
    if not raw:
        return default
    try:
        value = decode_json(raw)
    except PersistenceReadCorruption as exc:
        _logger.error("Ignoring unreadable value at %s: %s", key, exc)
        return default
    if not isinstance(value, type(default)):
        _logger.error(
            "Ignoring value at %s: expected %s, got %s",
            key,
            type(default).__name__,
            type(value).__name__,
        )
        return default
    return value


def save_json(storage: KeyValueStorage, key: str, value: object) -> bool:
    """Serialize and store a value, returning False when the write fails."""
    try:
        payload = json.dumps(value, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        _logger.error("Failed to serialize value for %s: %s", key, exc)
        return False
    try:
        return storage.set(key, payload)
    except Exception as exc:
        _logger.error("Failed to write %s: %s", key, exc)
        return False


def stored_size(storage: KeyValueStorage, keys: tuple[str, ...] = ALL_KEYS) -> int:
    """Return the total byte size of the raw values stored at ``keys``."""
    total = 0
    for key in keys:
        try:
            total += len(read_value(storage, key) or b"")
        except PersistenceReadFailure as exc:
            _logger.error("Skipping size of %s: %s", key, exc)
    return total
