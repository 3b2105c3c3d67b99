"""Directory-backed key-value storage with one file per key."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from leftover_chef.domain.errors import PersistenceReadFailure, PersistenceWriteFailure
from leftover_chef.services.storage import KeyValueStorage


@dataclass
class FileKeyValueStorage(KeyValueStorage):
    """Stores each key as a file under ``root``."""

    root: Path

    @classmethod
    def create(cls, root: str | Path) -> "FileKeyValueStorage":
        """Create the storage, making the directory if needed."""
        path = Path(root)
        path.mkdir(parents=True, exist_ok=True)
        return cls(root=path)

    def get(self, key: str) -> bytes | None:
        path = self._path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceReadFailure(f"could not read {key}: {exc}") from exc

    def set(self, key: str, value: bytes) -> bool:
        """Write the value atomically by renaming a temporary file."""
        path = self._path(key)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.")
        except OSError as exc:
            raise PersistenceWriteFailure(f"could not write {key}: {exc}") from exc
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise PersistenceWriteFailure(f"could not write {key}: {exc}") from exc
        return True

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceWriteFailure(f"could not delete {key}: {exc}") from exc

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"
