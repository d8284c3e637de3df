from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from common.coerce import day_window, month_bounds, percentage
from finance_hub.records import Invoice
from planner.records import PlannerItem
from projections.records import Projection
from todo.records import Task

from .document import StudioDocument
from .normalize import invoice_is_late, planner_item_is_late

UNKNOWN_CLIENT = "Unknown"
NO_CLIENT = "-"

WEEK_RADIUS_DAYS = 3
EFFORT_WINDOW_DAYS = 30


@dataclass(frozen=True)
class EffortRow:
    client_id: int | None
    name: str
    minutes: int
    pct: Decimal

    def to_dict(self) -> dict:
        return {"clientId": self.client_id, "name": self.name, "minutes": self.minutes, "pct": self.pct}


@dataclass(frozen=True)
class EffortSummary:
    rows: tuple[EffortRow, ...]
    total_minutes: int

    @property
    def top(self) -> EffortRow | None:
        return self.rows[0] if self.rows else None

    def to_dict(self) -> dict:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "totalMinutes": self.total_minutes,
            "top": self.top.to_dict() if self.top else None,
        }


@dataclass(frozen=True)
class ProjectionProgress:
    achieved_revenue: Decimal
    achieved_clients: int
    revenue_pct: Decimal
    client_pct: Decimal

    def to_dict(self) -> dict:
        return {
            "achievedRevenue": self.achieved_revenue,
            "achievedClients": self.achieved_clients,
            "revenuePct": self.revenue_pct,
            "clientPct": self.client_pct,
        }


def _dated(items, start: date, end: date):
    return [item for item in items if item.date is not None and start <= item.date <= end]


def today_items(document: StudioDocument, today: date) -> list[PlannerItem]:
    return _dated(document.planner, today, today)


def week_items(document: StudioDocument, today: date) -> list[PlannerItem]:
    start, end = day_window(today, WEEK_RADIUS_DAYS, WEEK_RADIUS_DAYS)
    return _dated(document.planner, start, end)


def overdue_items(document: StudioDocument, today: date) -> list[PlannerItem]:
    """
    Elementi gia marcati overdue piu quelli scaduti e non chiusi.
    Un elemento che soddisfa entrambe le condizioni compare una volta sola.
    """
    seen = set()
    rows = []
    for item in document.planner:
        if item.status != PlannerItem.Status.OVERDUE and not planner_item_is_late(item, today):
            continue
        if item.id in seen:
            continue
        seen.add(item.id)
        rows.append(item)
    return rows


def effort_summary(document: StudioDocument, today: date) -> EffortSummary:
    start, _ = day_window(today, EFFORT_WINDOW_DAYS)
    minutes_by_client: dict = {}
    for log in _dated(document.efforts, start, today):
        minutes_by_client[log.client_id] = minutes_by_client.get(log.client_id, 0) + log.minutes

    total = sum(minutes_by_client.values())
    rows = [
        EffortRow(
            client_id=client_id,
            name=client_label(document, client_id, UNKNOWN_CLIENT),
            minutes=minutes,
            pct=percentage(minutes, total),
        )
        for client_id, minutes in minutes_by_client.items()
    ]
    rows.sort(key=lambda row: row.minutes, reverse=True)
    return EffortSummary(rows=tuple(rows), total_minutes=total)


def active_projection(document: StudioDocument, today: date) -> Projection | None:
    for projection in document.projections:
        if projection.covers(today):
            return projection
    return None


def projection_progress(document: StudioDocument, projection: Projection) -> ProjectionProgress:
    achieved_revenue = Decimal("0")
    clients = set()
    for invoice in document.invoices:
        if not invoice.is_paid or invoice.due_date is None:
            continue
        if not projection.covers(invoice.due_date):
            continue
        achieved_revenue += invoice.amount
        clients.add(invoice.client_id)
    return ProjectionProgress(
        achieved_revenue=achieved_revenue,
        achieved_clients=len(clients),
        revenue_pct=percentage(achieved_revenue, projection.revenue_target),
        client_pct=percentage(len(clients), projection.client_target),
    )


def overdue_invoices(document: StudioDocument, today: date) -> list[Invoice]:
    return [
        invoice
        for invoice in document.invoices
        if invoice.status == Invoice.Status.OVERDUE or invoice_is_late(invoice, today)
    ]


def pending_total(document: StudioDocument) -> Decimal:
    return sum((invoice.amount for invoice in document.invoices if not invoice.is_paid), Decimal("0"))


def overdue_invoices_total(document: StudioDocument, today: date) -> Decimal:
    return sum((invoice.amount for invoice in overdue_invoices(document, today)), Decimal("0"))


def client_label(document: StudioDocument, client_id, placeholder: str = NO_CLIENT) -> str:
    return document.client_name(client_id, placeholder)


# Viste per tab

def planner_month(document: StudioDocument, today: date) -> list[PlannerItem]:
    start, end = month_bounds(today)
    return sorted(_dated(document.planner, start, end), key=lambda item: item.date)


def recent_efforts(document: StudioDocument):
    return sorted(document.efforts, key=lambda log: log.date or date.min, reverse=True)


def task_lanes(document: StudioDocument) -> dict[str, list[Task]]:
    lanes = {status.value: [] for status in Task.Status}
    for task in document.tasks:
        lanes.setdefault(str(task.status), []).append(task)
    return lanes


def invoice_ledger(document: StudioDocument) -> list[Invoice]:
    return sorted(document.invoices, key=lambda invoice: invoice.due_date or date.max)


def build_dashboard(document: StudioDocument, today: date) -> dict:
    summary = effort_summary(document, today)
    projection = active_projection(document, today)
    late_invoices = overdue_invoices(document, today)
    return {
        "today": today,
        "todayItems": today_items(document, today),
        "weekItems": week_items(document, today),
        "overdueItems": overdue_items(document, today),
        "effortSummary": summary,
        "activeProjection": projection,
        "projectionProgress": projection_progress(document, projection) if projection else None,
        "overdueInvoices": late_invoices,
        "overdueInvoicesTotal": overdue_invoices_total(document, today),
        "pendingTotal": pending_total(document),
    }
