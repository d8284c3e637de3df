from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from common.coerce import format_date, parse_date, parse_int, parse_optional_int, text_or_empty


@dataclass(frozen=True)
class EffortLog:
    id: int
    client_id: int | None
    date: date | None
    posts: int = 0
    reels: int = 0
    minutes: int = 0
    notes: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "EffortLog":
        return cls(
            id=parse_int(data.get("id")),
            client_id=parse_optional_int(data.get("clientId")),
            date=parse_date(data.get("date")),
            posts=max(parse_int(data.get("posts")), 0),
            reels=max(parse_int(data.get("reels")), 0),
            minutes=max(parse_int(data.get("minutes")), 0),
            notes=text_or_empty(data.get("notes")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "clientId": self.client_id,
            "date": format_date(self.date),
            "posts": self.posts,
            "reels": self.reels,
            "minutes": self.minutes,
            "notes": self.notes,
        }
