from django.http import JsonResponse
from django.shortcuts import redirect
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET

from core.payload import records_payload
from core.state import StudioState

from . import services


@require_GET
@ensure_csrf_cookie
def client_list(request):
    document = StudioState.open().document
    return JsonResponse({"clients": records_payload(document, document.clients)})


def add_client(request):
    if request.method != "POST":
        return redirect("/clients/")
    StudioState.open().apply(services.add_client, request.POST)
    return redirect("/clients/")


def update_client(request):
    if request.method != "POST":
        return redirect("/clients/")
    StudioState.open().apply(services.update_client_field, request.POST)
    return redirect("/clients/")
