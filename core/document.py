from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from typing import Callable

from django.core.serializers.json import DjangoJSONEncoder

from clients.records import Client
from common.coerce import parse_int
from efforts.records import EffortLog
from finance_hub.records import Invoice
from planner.records import PlannerItem
from projections.records import Projection
from todo.records import Task

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# chiave della collezione nel documento -> tipo record
COLLECTIONS = (
    ("clients", Client),
    ("planner", PlannerItem),
    ("efforts", EffortLog),
    ("tasks", Task),
    ("invoices", Invoice),
    ("projections", Projection),
)


@dataclass(frozen=True)
class StudioDocument:
    """
    Documento radice: le sei collezioni, ordinate per inserimento, piu il contatore degli id.
    Ogni mutazione produce un nuovo documento; quello vecchio resta invariato.
    """

    clients: tuple[Client, ...] = ()
    planner: tuple[PlannerItem, ...] = ()
    efforts: tuple[EffortLog, ...] = ()
    tasks: tuple[Task, ...] = ()
    invoices: tuple[Invoice, ...] = ()
    projections: tuple[Projection, ...] = ()
    payments_out: tuple = ()
    next_id: int = 1
    schema_version: int = SCHEMA_VERSION

    def allocate_id(self) -> tuple[int, "StudioDocument"]:
        return self.next_id, replace(self, next_id=self.next_id + 1)

    def append(self, collection: str, record) -> "StudioDocument":
        return replace(self, **{collection: getattr(self, collection) + (record,)})

    def find(self, collection: str, record_id):
        for record in getattr(self, collection):
            if record.id == record_id:
                return record
        return None

    def put(self, collection: str, record) -> "StudioDocument":
        """
        Sostituisce per intero il record con lo stesso id; se non esiste il documento resta invariato.
        """
        rows = getattr(self, collection)
        updated = tuple(record if row.id == record.id else row for row in rows)
        if updated == rows:
            return self
        return replace(self, **{collection: updated})

    def patch(self, collection: str, record_id, **changes) -> "StudioDocument":
        record = self.find(collection, record_id)
        if record is None:
            return self
        return self.put(collection, replace(record, **changes))

    def client_name(self, client_id, placeholder: str = "") -> str:
        for client in self.clients:
            if client.id == client_id:
                return client.name
        return placeholder

    def to_dict(self) -> dict:
        payload = {
            "schemaVersion": self.schema_version,
            "nextId": self.next_id,
        }
        for key, _record in COLLECTIONS:
            payload[key] = [row.to_dict() for row in getattr(self, key)]
        payload["paymentsOut"] = list(self.payments_out)
        return payload

    @classmethod
    def from_dict(cls, data: dict) -> "StudioDocument":
        values = {}
        for key, record in COLLECTIONS:
            rows = []
            for raw in _collection(data, key):
                if not isinstance(raw, dict):
                    logger.warning("Skipping malformed %s record: %r", key, raw)
                    continue
                rows.append(record.from_dict(raw))
            values[key] = tuple(rows)
        values["payments_out"] = tuple(_collection(data, "paymentsOut"))
        values["next_id"] = max(parse_int(data.get("nextId"), default=1), _max_id(values) + 1)
        values["schema_version"] = SCHEMA_VERSION
        return cls(**values)


def _collection(data: dict, key: str) -> list:
    rows = data.get(key)
    if rows is None:
        return []
    if not isinstance(rows, list):
        logger.warning("Skipping %s: expected a list, got %s", key, type(rows).__name__)
        return []
    return rows


def _max_id(values: dict) -> int:
    ids = [row.id for key, _record in COLLECTIONS for row in values.get(key, ())]
    return max(ids, default=0)


def _migrate_v0_to_v1(data: dict) -> dict:
    # Documento legacy senza versione: id casuali, nessun contatore.
    migrated = dict(data)
    for key, _record in COLLECTIONS:
        migrated.setdefault(key, [])
    migrated.setdefault("paymentsOut", [])
    migrated.pop("nextId", None)
    migrated["schemaVersion"] = 1
    return migrated


MIGRATIONS: dict[int, Callable[[dict], dict]] = {
    0: _migrate_v0_to_v1,
}


def migrate(data: dict) -> dict:
    # versioni negative o illeggibili valgono come documento legacy
    version = max(parse_int(data.get("schemaVersion"), default=0), 0)
    if version > SCHEMA_VERSION:
        logger.warning(
            "Stored document has schema version %s, newer than supported %s; loading known fields only",
            version,
            SCHEMA_VERSION,
        )
        return data
    while version < SCHEMA_VERSION:
        data = MIGRATIONS[version](data)
        version = parse_int(data.get("schemaVersion"), default=version + 1)
    return data


def empty_document() -> StudioDocument:
    return StudioDocument()


def load_document(raw: bytes | str | None) -> StudioDocument:
    """
    Decodifica il documento salvato. Se manca si parte dal documento vuoto;
    se non e JSON valido si registra un warning e si riparte dal vuoto.
    """
    if not raw:
        return empty_document()
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, UnicodeDecodeError) as exc:
        logger.warning("Failed to parse stored document, starting empty: %s", exc)
        return empty_document()
    if not isinstance(data, dict):
        logger.warning("Stored document is %s, not an object; starting empty", type(data).__name__)
        return empty_document()
    return StudioDocument.from_dict(migrate(data))


def dump_document(document: StudioDocument) -> bytes:
    return json.dumps(document.to_dict(), cls=DjangoJSONEncoder).encode("utf-8")
