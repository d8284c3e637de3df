from __future__ import annotations

from .aggregates import client_label
from .document import StudioDocument


def record_payload(document: StudioDocument, record) -> dict:
    payload = record.to_dict()
    if hasattr(record, "client_id"):
        payload["clientName"] = client_label(document, record.client_id)
    return payload


def records_payload(document: StudioDocument, records) -> list[dict]:
    return [record_payload(document, record) for record in records]


def dashboard_payload(document: StudioDocument, sections: dict) -> dict:
    projection = sections["activeProjection"]
    progress = sections["projectionProgress"]
    return {
        "today": sections["today"],
        "todayItems": records_payload(document, sections["todayItems"]),
        "weekItems": records_payload(document, sections["weekItems"]),
        "overdueItems": records_payload(document, sections["overdueItems"]),
        "effortSummary": sections["effortSummary"].to_dict(),
        "activeProjection": projection.to_dict() if projection else None,
        "projectionProgress": progress.to_dict() if progress else None,
        "overdueInvoices": records_payload(document, sections["overdueInvoices"]),
        "overdueInvoicesTotal": sections["overdueInvoicesTotal"],
        "pendingTotal": sections["pendingTotal"],
    }
