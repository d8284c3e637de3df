from __future__ import annotations

from dataclasses import replace
from datetime import date

from finance_hub.records import Invoice
from planner.records import PlannerItem

from .document import StudioDocument


def planner_item_is_late(item: PlannerItem, today: date) -> bool:
    return not item.is_closed and item.date is not None and item.date < today


def invoice_is_late(invoice: Invoice, today: date) -> bool:
    return not invoice.is_paid and invoice.due_date is not None and invoice.due_date < today


def normalize_overdues(document: StudioDocument, today: date) -> StudioDocument:
    """
    Ricalcola lo stato "overdue" di planner e fatture rispetto a oggi.
    Restituisce lo stesso oggetto se non cambia nulla, quindi e idempotente.
    """
    changed = False

    planner = []
    for item in document.planner:
        if planner_item_is_late(item, today) and item.status != PlannerItem.Status.OVERDUE:
            item = replace(item, status=PlannerItem.Status.OVERDUE)
            changed = True
        planner.append(item)

    invoices = []
    for invoice in document.invoices:
        if invoice_is_late(invoice, today) and invoice.status != Invoice.Status.OVERDUE:
            invoice = replace(invoice, status=Invoice.Status.OVERDUE)
            changed = True
        invoices.append(invoice)

    if not changed:
        return document
    return replace(document, planner=tuple(planner), invoices=tuple(invoices))
