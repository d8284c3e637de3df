from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from django.db import models

from common.coerce import format_date, parse_date, parse_decimal, parse_int, text_or_empty


@dataclass(frozen=True)
class Projection:
    """
    Obiettivo di fatturato e numero clienti su un intervallo di date (estremi inclusi).
    """

    class Type(models.TextChoices):
        MONTHLY = "monthly", "Monthly"
        QUARTERLY = "quarterly", "Quarterly"
        YEARLY = "yearly", "Yearly"

    id: int
    start_date: date | None
    end_date: date | None
    type: str = Type.MONTHLY
    revenue_target: Decimal = Decimal("0")
    client_target: int = 0
    note: str = ""

    def covers(self, day: date) -> bool:
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= day <= self.end_date

    @classmethod
    def from_dict(cls, data: dict) -> "Projection":
        return cls(
            id=parse_int(data.get("id")),
            start_date=parse_date(data.get("startDate")),
            end_date=parse_date(data.get("endDate")),
            type=text_or_empty(data.get("type")) or cls.Type.MONTHLY,
            revenue_target=parse_decimal(data.get("revenueTarget")),
            client_target=max(parse_int(data.get("clientTarget")), 0),
            note=text_or_empty(data.get("note")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "startDate": format_date(self.start_date),
            "endDate": format_date(self.end_date),
            "type": str(self.type),
            "revenueTarget": str(self.revenue_target),
            "clientTarget": self.client_target,
            "note": self.note,
        }

    def __str__(self):
        return f"{format_date(self.start_date)} → {format_date(self.end_date)}"
