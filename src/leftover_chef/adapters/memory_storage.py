"""In-process key-value storage."""

from dataclasses import dataclass, field

from leftover_chef.domain.errors import PersistenceWriteFailure
from leftover_chef.services.storage import KeyValueStorage


@dataclass
class InMemoryKeyValueStorage(KeyValueStorage):
    """Dictionary-backed storage with an optional total byte quota."""

    quota_bytes: int | None = None
    values: dict[str, bytes] = field(default_factory=dict)

    def get(self, key: str) -> bytes | None:
        return self.values.get(key)

    def set(self, key: str, value: bytes) -> bool:
        """Store a value, raising when it would exceed the quota."""
        if self.quota_bytes is not None:
            used = sum(len(data) for name, data in self.values.items() if name != key)
            if used + len(value) > self.quota_bytes:
                raise PersistenceWriteFailure(
                    f"quota of {self.quota_bytes} bytes exceeded writing {key}"
                )
        self.values[key] = value
        return True

    def delete(self, key: str) -> None:
        self.values.pop(key, None)
