from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from django.db import models

from common.coerce import format_date, parse_date, parse_decimal, parse_int, text_or_empty


class ClientStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    PAUSED = "paused", "Paused"
    ARCHIVED = "archived", "Archived"


@dataclass(frozen=True)
class Client:
    """
    Cliente dello studio. Il retainer e la fee mensile ricorrente.
    """

    id: int
    name: str
    brand: str = ""
    retainer: Decimal = Decimal("0")
    start_date: date | None = None
    status: str = ClientStatus.ACTIVE
    notes: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Client":
        return cls(
            id=parse_int(data.get("id")),
            name=text_or_empty(data.get("name")),
            brand=text_or_empty(data.get("brand")),
            retainer=parse_decimal(data.get("retainer")),
            start_date=parse_date(data.get("startDate")),
            status=text_or_empty(data.get("status")) or ClientStatus.ACTIVE,
            notes=text_or_empty(data.get("notes")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "retainer": str(self.retainer),
            "startDate": format_date(self.start_date),
            "status": str(self.status),
            "notes": self.notes,
        }

    def __str__(self):
        return self.name
