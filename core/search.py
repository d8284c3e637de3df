from __future__ import annotations

from dataclasses import dataclass, field

from clients.records import Client
from finance_hub.records import Invoice
from planner.records import PlannerItem
from todo.records import Task

from .document import StudioDocument


@dataclass(frozen=True)
class SearchResults:
    clients: list[Client] = field(default_factory=list)
    planner: list[PlannerItem] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    invoices: list[Invoice] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.clients) + len(self.planner) + len(self.tasks) + len(self.invoices)


def search(document: StudioDocument, query) -> SearchResults:
    needle = (query or "").strip().lower()
    if not needle:
        return SearchResults()

    def contains(value) -> bool:
        return needle in (value or "").lower()

    names = {client.id: client.name for client in document.clients}
    return SearchResults(
        clients=[c for c in document.clients if contains(c.name) or contains(c.brand) or contains(c.notes)],
        planner=[
            p
            for p in document.planner
            if contains(p.title) or contains(p.caption) or contains(names.get(p.client_id, ""))
        ],
        tasks=[t for t in document.tasks if contains(t.title) or contains(t.description) or contains(t.assignee)],
        invoices=[inv for inv in document.invoices if contains(names.get(inv.client_id, ""))],
    )
