from django.http import JsonResponse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from .aggregates import build_dashboard
from .payload import dashboard_payload, records_payload
from .search import search as search_document
from .state import StudioState


@require_GET
@ensure_csrf_cookie
def dashboard(request):
    state = StudioState.open()
    sections = build_dashboard(state.document, state.today)
    return JsonResponse(dashboard_payload(state.document, sections))


@require_GET
def search(request):
    query = request.GET.get("q", "")
    document = StudioState.open().document
    results = search_document(document, query)
    return JsonResponse(
        {
            "query": query,
            "total": results.total,
            "clients": records_payload(document, results.clients),
            "planner": records_payload(document, results.planner),
            "tasks": records_payload(document, results.tasks),
            "invoices": records_payload(document, results.invoices),
        }
    )
