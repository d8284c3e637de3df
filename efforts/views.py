from django.http import JsonResponse
from django.shortcuts import redirect
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from core.aggregates import recent_efforts
from core.payload import records_payload
from core.state import StudioState

from . import services


@require_GET
@ensure_csrf_cookie
def effort_list(request):
    document = StudioState.open().document
    return JsonResponse({"efforts": records_payload(document, recent_efforts(document))})


def add_effort(request):
    if request.method != "POST":
        return redirect("/efforts/")
    StudioState.open().apply(services.add_effort, request.POST)
    return redirect("/efforts/")
