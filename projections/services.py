from __future__ import annotations

from decimal import Decimal

from core.document import StudioDocument

from .forms import ProjectionForm
from .records import Projection


def add_projection(document: StudioDocument, data, *, today=None) -> StudioDocument:
    form = ProjectionForm(data)
    if not form.is_valid():
        return document
    cleaned = form.cleaned_data
    projection_id, document = document.allocate_id()
    projection = Projection(
        id=projection_id,
        start_date=cleaned["start_date"],
        end_date=cleaned["end_date"],
        type=cleaned["type"],
        revenue_target=cleaned["revenue_target"] or Decimal("0"),
        client_target=cleaned["client_target"] or 0,
        note=cleaned["note"],
    )
    return document.append("projections", projection)
