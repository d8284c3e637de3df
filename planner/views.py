from django.http import JsonResponse
from django.shortcuts import redirect
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from common.coerce import month_bounds
from core.aggregates import planner_month
from core.payload import records_payload
from core.state import StudioState

from . import services


@require_GET
@ensure_csrf_cookie
def month_view(request):
    state = StudioState.open()
    start, end = month_bounds(state.today)
    items = planner_month(state.document, state.today)
    return JsonResponse(
        {
            "start": start,
            "end": end,
            "count": len(items),
            "items": records_payload(state.document, items),
        }
    )


def add_item(request):
    if request.method != "POST":
        return redirect("/planner/")
    StudioState.open().apply(services.add_planner_item, request.POST)
    return redirect("/planner/")


def upsert_item(request):
    if request.method != "POST":
        return redirect("/planner/")
    StudioState.open().apply(services.upsert_planner_item, request.POST)
    return redirect("/planner/")


def mark_status(request):
    if request.method != "POST":
        return redirect("/planner/")
    StudioState.open().apply(services.mark_planner_status, request.POST)
    return redirect("/planner/")
