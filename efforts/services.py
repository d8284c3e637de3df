from __future__ import annotations

from core.document import StudioDocument

from .forms import EffortLogForm
from .records import EffortLog


def add_effort(document: StudioDocument, data, *, today=None) -> StudioDocument:
    form = EffortLogForm(data)
    if not form.is_valid():
        return document
    cleaned = form.cleaned_data
    log_id, document = document.allocate_id()
    log = EffortLog(
        id=log_id,
        client_id=cleaned["client_id"],
        date=cleaned["date"],
        posts=cleaned["posts"] or 0,
        reels=cleaned["reels"] or 0,
        minutes=cleaned["minutes"] or 0,
        notes=cleaned["notes"],
    )
    return document.append("efforts", log)
