"""Supabase table implementation of key-value storage."""

from dataclasses import dataclass

from supabase import Client

from leftover_chef.domain.errors import PersistenceReadFailure, PersistenceWriteFailure
from leftover_chef.services.storage import KeyValueStorage

TABLE_NAME = "kv_store"


@dataclass
class SupabaseKeyValueStorage(KeyValueStorage):
    """Supabase-backed storage using a ``kv_store(key, value)`` table."""

    client: Client
    table_name: str = TABLE_NAME

    def get(self, key: str) -> bytes | None:
        """Return the stored value for a key."""
        try:
            response = (
                self.client.table(self.table_name)
                .select("value")
                .eq("key", key)
                .limit(1)
                .execute()
            )
        except Exception as exc:
            raise PersistenceReadFailure(f"could not read {key}: {exc}") from exc
        if not response.data:
            return None
        value = response.data[0].get("value")
        if value is None:
            return None
        return str(value).encode("utf-8")

    def set(self, key: str, value: bytes) -> bool:
        """Upsert the value for a key."""
        try:
            response = (
                self.client.table(self.table_name)
                .upsert({"key": key, "value": value.decode("utf-8")})
                .execute()
            )
        except Exception as exc:
            raise PersistenceWriteFailure(f"could not write {key}: {exc}") from exc
        if not response.data:
            raise PersistenceWriteFailure(f"could not write {key}")
        return True

    def delete(self, key: str) -> None:
        try:
            self.client.table(self.table_name).delete().eq("key", key).execute()
        except Exception as exc:
            raise PersistenceWriteFailure(f"could not delete {key}: {exc}") from exc
