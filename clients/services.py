from __future__ import annotations

from decimal import Decimal

from core.document import StudioDocument

from .forms import ClientFieldForm, ClientForm
from .records import Client, ClientStatus


def add_client(document: StudioDocument, data, *, today) -> StudioDocument:
    form = ClientForm(data)
    if not form.is_valid():
        return document
    client_id, document = document.allocate_id()
    client = Client(
        id=client_id,
        name=form.cleaned_data["name"],
        brand=form.cleaned_data["brand"],
        retainer=form.cleaned_data["retainer"] or Decimal("0"),
        start_date=today,
        status=ClientStatus.ACTIVE,
        notes=form.cleaned_data["notes"],
    )
    return document.append("clients", client)


def update_client_field(document: StudioDocument, data, *, today=None) -> StudioDocument:
    form = ClientFieldForm(data)
    if not form.is_valid():
        return document
    return document.patch("clients", form.cleaned_data["id"], **{form.cleaned_data["field"]: form.cleaned_data["value"]})
