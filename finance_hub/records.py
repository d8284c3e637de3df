from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from django.db import models

from common.coerce import (
    format_date,
    parse_date,
    parse_decimal,
    parse_int,
    parse_month,
    parse_optional_int,
    text_or_empty,
)


@dataclass(frozen=True)
class Invoice:
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        PAID = "paid", "Paid"
        OVERDUE = "overdue", "Overdue"

    id: int
    client_id: int | None
    month: str
    amount: Decimal
    due_date: date | None
    status: str = Status.PENDING
    paid_date: date | None = None

    @property
    def is_paid(self) -> bool:
        return self.status == self.Status.PAID

    @classmethod
    def from_dict(cls, data: dict) -> "Invoice":
        return cls(
            id=parse_int(data.get("id")),
            client_id=parse_optional_int(data.get("clientId")),
            month=parse_month(data.get("month")),
            amount=parse_decimal(data.get("amount")),
            due_date=parse_date(data.get("dueDate")),
            status=text_or_empty(data.get("status")) or cls.Status.PENDING,
            paid_date=parse_date(data.get("paidDate")),
        )

    def to_dict(self) -> dict:
        payload = {
            "id": self.id,
            "clientId": self.client_id,
            "month": self.month,
            "amount": str(self.amount),
            "dueDate": format_date(self.due_date),
            "status": str(self.status),
        }
        if self.paid_date:
            payload["paidDate"] = format_date(self.paid_date)
        return payload

    def __str__(self):
        return f"{self.month} · {self.amount}"
