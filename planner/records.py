from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from django.db import models

from common.coerce import format_date, parse_date, parse_int, parse_optional_int, text_or_empty


class Platform(models.TextChoices):
    INSTAGRAM = "Instagram", "Instagram"
    FACEBOOK = "Facebook", "Facebook"
    LINKEDIN = "LinkedIn", "LinkedIn"
    YOUTUBE = "YouTube", "YouTube"
    WEBSITE = "Website / Blog", "Website / Blog"


class ContentType(models.TextChoices):
    POST = "Post", "Post"
    REEL = "Reel", "Reel"
    STORY = "Story", "Story"
    AD_CREATIVE = "Ad Creative", "Ad Creative"
    EMAILER = "Emailer", "Emailer"


@dataclass(frozen=True)
class PlannerItem:
    class Status(models.TextChoices):
        PLANNED = "planned", "Planned"
        DONE = "done", "Done"
        OVERDUE = "overdue", "Overdue"
        SKIPPED = "skipped", "Skipped"

    id: int
    client_id: int | None
    date: date | None
    platform: str = Platform.INSTAGRAM
    type: str = ContentType.POST
    title: str = ""
    caption: str = ""
    status: str = Status.PLANNED

    @property
    def is_closed(self) -> bool:
        # done/skipped non vengono mai toccati dalla normalizzazione
        return self.status in (self.Status.DONE, self.Status.SKIPPED)

    @classmethod
    def from_dict(cls, data: dict) -> "PlannerItem":
        return cls(
            id=parse_int(data.get("id")),
            client_id=parse_optional_int(data.get("clientId")),
            date=parse_date(data.get("date")),
            platform=text_or_empty(data.get("platform")) or Platform.INSTAGRAM,
            type=text_or_empty(data.get("type")) or ContentType.POST,
            title=text_or_empty(data.get("title")),
            caption=text_or_empty(data.get("caption")),
            status=text_or_empty(data.get("status")) or cls.Status.PLANNED,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "clientId": self.client_id,
            "date": format_date(self.date),
            "platform": str(self.platform),
            "type": str(self.type),
            "title": self.title,
            "caption": self.caption,
            "status": str(self.status),
        }

    def __str__(self):
        return self.title or f"{self.platform} {self.type}"
