from django.http import JsonResponse
from django.shortcuts import redirect
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from core.aggregates import invoice_ledger, overdue_invoices, overdue_invoices_total, pending_total
from core.payload import records_payload
from core.state import StudioState

from . import services


@require_GET
@ensure_csrf_cookie
def ledger(request):
    state = StudioState.open()
    document = state.document
    late = overdue_invoices(document, state.today)
    return JsonResponse(
        {
            "invoices": records_payload(document, invoice_ledger(document)),
            "pendingTotal": pending_total(document),
            "overdueTotal": overdue_invoices_total(document, state.today),
            "overdueCount": len(late),
        }
    )


def add_invoice(request):
    if request.method != "POST":
        return redirect("/finance/")
    StudioState.open().apply(services.add_invoice, request.POST)
    return redirect("/finance/")


def mark_paid(request):
    if request.method != "POST":
        return redirect("/finance/")
    StudioState.open().apply(services.mark_invoice_paid, request.POST)
    return redirect("/finance/")
