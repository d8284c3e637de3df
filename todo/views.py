from django.http import JsonResponse
from django.shortcuts import redirect
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from core.aggregates import task_lanes
from core.payload import records_payload
from core.state import StudioState

from . import services


@require_GET
@ensure_csrf_cookie
def dashboard(request):
    document = StudioState.open().document
    lanes = task_lanes(document)
    return JsonResponse(
        {
            "lanes": {status: records_payload(document, tasks) for status, tasks in lanes.items()},
            "counts": {status: len(tasks) for status, tasks in lanes.items()},
        }
    )


def add_task(request):
    if request.method != "POST":
        return redirect("/todo/")
    StudioState.open().apply(services.add_task, request.POST)
    return redirect("/todo/")


def update_status(request):
    if request.method != "POST":
        return redirect("/todo/")
    StudioState.open().apply(services.update_task_status, request.POST)
    return redirect("/todo/")
