from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from django.conf import settings
from django.utils import timezone

from .document import StudioDocument, dump_document, load_document
from .normalize import normalize_overdues
from .store import KeyValueStore, get_store

logger = logging.getLogger(__name__)

Mutator = Callable[..., StudioDocument]


class StudioState:
    """
    Stato applicativo esplicito: possiede il documento corrente e lo store.
    Le viste lo aprono, leggono o applicano un mutator; ogni mutazione effettiva
    riscrive l'intero documento nello store.
    """

    def __init__(self, store: KeyValueStore, document: StudioDocument, today: date, key: str):
        self.store = store
        self.document = document
        self.today = today
        self.key = key

    @classmethod
    def open(cls, store: KeyValueStore | None = None, today: date | None = None, key: str | None = None):
        store = store if store is not None else get_store()
        today = today or timezone.localdate()
        key = key or settings.STUDIO_DOCUMENT_KEY
        raw = store.get(key)
        loaded = load_document(raw)
        state = cls(store, normalize_overdues(loaded, today), today, key)
        if raw is None or state.document is not loaded:
            state.save()
        return state

    def save(self) -> None:
        self.store.set(self.key, dump_document(self.document))

    def apply(self, mutator: Mutator, *args, **kwargs) -> bool:
        updated = mutator(self.document, *args, today=self.today, **kwargs)
        if updated is self.document:
            logger.debug("%s left the document unchanged", getattr(mutator, "__name__", mutator))
            return False
        self.document = updated
        self.save()
        return True
