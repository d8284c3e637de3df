from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from django.db import models

from common.coerce import format_date, parse_date, parse_int, parse_optional_int, text_or_empty


@dataclass(frozen=True)
class Task:
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        IN_PROGRESS = "in_progress", "In progress"
        COMPLETED = "completed", "Completed"
        OVERDUE = "overdue", "Overdue"

    class Priority(models.TextChoices):
        LOW = "low", "Low"
        MEDIUM = "medium", "Medium"
        HIGH = "high", "High"

    id: int
    title: str
    description: str = ""
    client_id: int | None = None
    assignee: str = ""
    status: str = Status.PENDING
    priority: str = Priority.MEDIUM
    due_date: date | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        return cls(
            id=parse_int(data.get("id")),
            title=text_or_empty(data.get("title")),
            description=text_or_empty(data.get("description")),
            client_id=parse_optional_int(data.get("clientId")),
            assignee=text_or_empty(data.get("assignee")),
            status=text_or_empty(data.get("status")) or cls.Status.PENDING,
            priority=text_or_empty(data.get("priority")) or cls.Priority.MEDIUM,
            due_date=parse_date(data.get("dueDate")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "clientId": self.client_id,
            "assignee": self.assignee,
            "status": str(self.status),
            "priority": str(self.priority),
            "dueDate": format_date(self.due_date),
        }

    def __str__(self):
        return self.title
