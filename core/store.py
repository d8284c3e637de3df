from __future__ import annotations

from django.conf import settings
from django.utils.module_loading import import_string

from .models import StoredDocument


class KeyValueStore:
    """
    Contratto minimo: get(key) -> bytes | None, set(key, bytes). Niente transazioni.
    """

    def get(self, key: str) -> bytes | None:
        raise NotImplementedError

    def set(self, key: str, value: bytes) -> None:
        raise NotImplementedError


class DatabaseStore(KeyValueStore):
    def get(self, key: str) -> bytes | None:
        row = StoredDocument.objects.filter(key=key).values_list("value", flat=True).first()
        if row is None:
            return None
        return bytes(row)

    def set(self, key: str, value: bytes) -> None:
        StoredDocument.objects.update_or_create(key=key, defaults={"value": value})


class MemoryStore(KeyValueStore):
    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = value


def get_store() -> KeyValueStore:
    backend = import_string(settings.STUDIO_STORE_BACKEND)
    return backend()
