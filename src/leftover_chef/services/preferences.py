"""Persisted user preferences document."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime

from leftover_chef.domain.errors import PersistenceReadFailure
from leftover_chef.services.storage import (
    PREFERENCES_KEY,
    KeyValueStorage,
    delete_value,
    load_json,
    save_json,
)

_logger = logging.getLogger(__name__)


@dataclass
class PreferencesService:
    """Stores the last-used generation preferences as a JSON object."""

    storage: KeyValueStorage
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def save(self, preferences: dict[str, object]) -> bool:
        """Persist preferences, stamping ``updatedAt``."""
        payload = {**preferences, "updatedAt": datetime.now(tz=UTC).isoformat()}
        with self.lock:
            return save_json(self.storage, PREFERENCES_KEY, payload)

    def get(self) -> dict[str, object]:
        """Return stored preferences, or an empty dict."""
        try:
            return load_json(self.storage, PREFERENCES_KEY, {})
        except PersistenceReadFailure as exc:
            _logger.error("Could not read preferences: %s", exc)
            return {}

    def clear(self) -> bool:
        with self.lock:
            return delete_value(self.storage, PREFERENCES_KEY)
