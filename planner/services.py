from __future__ import annotations

from core.document import StudioDocument

from .forms import PlannerItemForm, PlannerStatusForm
from .records import PlannerItem


def _item_from_form(item_id, cleaned) -> PlannerItem:
    return PlannerItem(
        id=item_id,
        client_id=cleaned["client_id"],
        date=cleaned["date"],
        platform=cleaned["platform"],
        type=cleaned["type"],
        title=cleaned["title"],
        caption=cleaned["caption"],
        status=cleaned["status"],
    )


def add_planner_item(document: StudioDocument, data, *, today=None) -> StudioDocument:
    form = PlannerItemForm(data)
    if not form.is_valid():
        return document
    cleaned = dict(form.cleaned_data, status=PlannerItem.Status.PLANNED)
    item_id, document = document.allocate_id()
    return document.append("planner", _item_from_form(item_id, cleaned))


def upsert_planner_item(document: StudioDocument, data, *, today=None) -> StudioDocument:
    """
    Se l'id esiste gia il record viene sostituito per intero, altrimenti si aggiunge un nuovo elemento.
    """
    form = PlannerItemForm(data)
    if not form.is_valid():
        return document
    item_id = form.cleaned_data.get("id")
    if item_id is not None and document.find("planner", item_id) is not None:
        return document.put("planner", _item_from_form(item_id, form.cleaned_data))
    new_id, document = document.allocate_id()
    return document.append("planner", _item_from_form(new_id, form.cleaned_data))


def mark_planner_status(document: StudioDocument, data, *, today=None) -> StudioDocument:
    form = PlannerStatusForm(data)
    if not form.is_valid():
        return document
    return document.patch("planner", form.cleaned_data["id"], status=form.cleaned_data["status"])
