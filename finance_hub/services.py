from __future__ import annotations

from common.coerce import format_month
from core.document import StudioDocument

from .forms import InvoiceForm, InvoicePaymentForm
from .records import Invoice


def add_invoice(document: StudioDocument, data, *, today) -> StudioDocument:
    form = InvoiceForm(data)
    if not form.is_valid():
        return document
    cleaned = form.cleaned_data
    invoice_id, document = document.allocate_id()
    invoice = Invoice(
        id=invoice_id,
        client_id=cleaned["client_id"],
        month=cleaned["month"] or format_month(today),
        amount=cleaned["amount"],
        due_date=cleaned["due_date"] or today,
        status=Invoice.Status.PENDING,
    )
    return document.append("invoices", invoice)


def mark_invoice_paid(document: StudioDocument, data, *, today) -> StudioDocument:
    form = InvoicePaymentForm(data)
    if not form.is_valid():
        return document
    return document.patch(
        "invoices",
        form.cleaned_data["id"],
        status=Invoice.Status.PAID,
        paid_date=today,
    )
