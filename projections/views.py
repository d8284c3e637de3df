from django.http import JsonResponse
from django.shortcuts import redirect
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from core.aggregates import active_projection, projection_progress
from core.payload import records_payload
from core.state import StudioState

from . import services


@require_GET
@ensure_csrf_cookie
def projection_wall(request):
    state = StudioState.open()
    document = state.document
    active = active_projection(document, state.today)
    progress = projection_progress(document, active) if active else None
    return JsonResponse(
        {
            "projections": records_payload(document, document.projections),
            "active": active.to_dict() if active else None,
            "progress": progress.to_dict() if progress else None,
        }
    )


def add_projection(request):
    if request.method != "POST":
        return redirect("/projections/")
    StudioState.open().apply(services.add_projection, request.POST)
    return redirect("/projections/")
