import json
from datetime import date, timedelta
from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from clients.records import Client
from efforts.records import EffortLog
from finance_hub.records import Invoice
from planner.records import PlannerItem
from projections.records import Projection
from todo.records import Task

from .aggregates import (
    NO_CLIENT,
    active_projection,
    build_dashboard,
    client_label,
    effort_summary,
    overdue_invoices,
    overdue_invoices_total,
    overdue_items,
    pending_total,
    projection_progress,
    today_items,
    week_items,
)
from .document import SCHEMA_VERSION, StudioDocument, dump_document, load_document
from .models import StoredDocument
from .normalize import normalize_overdues
from .search import search
from .state import StudioState
from .store import DatabaseStore, MemoryStore

TODAY = date(2026, 3, 15)


def planner_item(item_id, day, status=PlannerItem.Status.PLANNED, client_id=1, **extra):
    return PlannerItem(id=item_id, client_id=client_id, date=day, status=status, **extra)


def invoice(invoice_id, due, amount="0", status=Invoice.Status.PENDING, client_id=1):
    return Invoice(
        id=invoice_id,
        client_id=client_id,
        month=due.strftime("%Y-%m"),
        amount=Decimal(amount),
        due_date=due,
        status=status,
    )


class StatusNormalizerTests(SimpleTestCase):
    def test_past_open_items_become_overdue(self):
        yesterday = TODAY - timedelta(days=1)
        document = StudioDocument(
            planner=(planner_item(1, yesterday), planner_item(2, TODAY)),
            invoices=(invoice(3, yesterday, "1000"), invoice(4, TODAY, "50")),
        )
        normalized = normalize_overdues(document, TODAY)
        self.assertEqual(normalized.planner[0].status, PlannerItem.Status.OVERDUE)
        self.assertEqual(normalized.planner[1].status, PlannerItem.Status.PLANNED)
        self.assertEqual(normalized.invoices[0].status, Invoice.Status.OVERDUE)
        self.assertEqual(normalized.invoices[1].status, Invoice.Status.PENDING)

    def test_closed_statuses_are_never_rewritten(self):
        long_ago = TODAY - timedelta(days=400)
        document = StudioDocument(
            planner=(
                planner_item(1, long_ago, PlannerItem.Status.DONE),
                planner_item(2, long_ago, PlannerItem.Status.SKIPPED),
            ),
            invoices=(invoice(3, long_ago, "10", Invoice.Status.PAID),),
        )
        normalized = normalize_overdues(document, TODAY)
        self.assertIs(normalized, document)
        self.assertEqual(
            [item.status for item in normalized.planner],
            [PlannerItem.Status.DONE, PlannerItem.Status.SKIPPED],
        )
        self.assertEqual(normalized.invoices[0].status, Invoice.Status.PAID)

    def test_normalizing_twice_changes_nothing(self):
        document = StudioDocument(
            planner=(planner_item(1, TODAY - timedelta(days=2)), planner_item(2, TODAY + timedelta(days=2))),
            invoices=(invoice(3, TODAY - timedelta(days=5), "20"),),
        )
        once = normalize_overdues(document, TODAY)
        twice = normalize_overdues(once, TODAY)
        self.assertIs(twice, once)
        self.assertEqual(twice, once)

    def test_items_without_date_are_left_alone(self):
        document = StudioDocument(planner=(planner_item(1, None),))
        self.assertIs(normalize_overdues(document, TODAY), document)


class DashboardAggregateTests(SimpleTestCase):
    def test_item_planned_today_is_in_today_and_week_views(self):
        item = planner_item(2, TODAY)
        document = StudioDocument(clients=(Client(id=1, name="Acme"),), planner=(item,))
        self.assertEqual(today_items(document, TODAY), [item])
        self.assertEqual(week_items(document, TODAY), [item])

    def test_week_view_spans_three_days_each_side(self):
        items = tuple(planner_item(offset + 10, TODAY + timedelta(days=offset)) for offset in range(-4, 5))
        document = StudioDocument(planner=items)
        days = [item.date for item in week_items(document, TODAY)]
        self.assertEqual(days[0], TODAY - timedelta(days=3))
        self.assertEqual(days[-1], TODAY + timedelta(days=3))
        self.assertEqual(len(days), 7)

    def test_overdue_view_lists_each_item_once(self):
        yesterday = TODAY - timedelta(days=1)
        flagged = planner_item(1, yesterday, PlannerItem.Status.OVERDUE)
        late = planner_item(2, yesterday)
        future_flag = planner_item(3, TODAY + timedelta(days=1), PlannerItem.Status.OVERDUE)
        done = planner_item(4, yesterday, PlannerItem.Status.DONE)
        document = StudioDocument(planner=(flagged, late, future_flag, done))
        self.assertEqual([item.id for item in overdue_items(document, TODAY)], [1, 2, 3])

    def test_unpaid_invoice_due_yesterday_is_overdue_and_pending(self):
        document = StudioDocument(invoices=(invoice(1, TODAY - timedelta(days=1), "1000"),))
        normalized = normalize_overdues(document, TODAY)
        self.assertEqual(normalized.invoices[0].status, Invoice.Status.OVERDUE)
        self.assertEqual([inv.id for inv in overdue_invoices(normalized, TODAY)], [1])
        self.assertEqual(pending_total(normalized), Decimal("1000"))

    def test_pending_total_skips_paid_invoices(self):
        document = StudioDocument(
            invoices=(
                invoice(1, TODAY, "100"),
                invoice(2, TODAY - timedelta(days=3), "250", Invoice.Status.OVERDUE),
                invoice(3, TODAY, "999", Invoice.Status.PAID),
            )
        )
        self.assertEqual(pending_total(document), Decimal("350"))

    def test_effort_summary_orders_clients_by_minutes(self):
        document = StudioDocument(
            clients=(Client(id=1, name="Alpha"), Client(id=2, name="Beta")),
            efforts=(
                EffortLog(id=3, client_id=1, date=TODAY, minutes=30),
                EffortLog(id=4, client_id=2, date=TODAY, minutes=70),
            ),
        )
        summary = effort_summary(document, TODAY)
        self.assertEqual(
            [(row.name, row.minutes, row.pct) for row in summary.rows],
            [("Beta", 70, Decimal("70.0")), ("Alpha", 30, Decimal("30.0"))],
        )
        self.assertEqual(summary.top.client_id, 2)

    def test_effort_percentages_add_up_to_one_hundred(self):
        document = StudioDocument(
            efforts=(
                EffortLog(id=1, client_id=1, date=TODAY, minutes=10),
                EffortLog(id=2, client_id=2, date=TODAY - timedelta(days=30), minutes=20),
                EffortLog(id=3, client_id=3, date=TODAY - timedelta(days=5), minutes=30),
            )
        )
        summary = effort_summary(document, TODAY)
        total = sum(row.pct for row in summary.rows)
        self.assertAlmostEqual(float(total), 100.0, delta=0.2)
        self.assertEqual(summary.rows[-1].name, "Unknown")

    def test_effort_summary_is_empty_outside_the_window(self):
        document = StudioDocument(
            efforts=(
                EffortLog(id=1, client_id=1, date=TODAY - timedelta(days=31), minutes=45),
                EffortLog(id=2, client_id=1, date=TODAY + timedelta(days=1), minutes=45),
            )
        )
        summary = effort_summary(document, TODAY)
        self.assertEqual(summary.rows, ())
        self.assertIsNone(summary.top)

    def test_projection_progress_against_targets(self):
        start = TODAY.replace(day=1)
        end = date(2026, 3, 31)
        projection = Projection(
            id=1, start_date=start, end_date=end, revenue_target=Decimal("10000"), client_target=5
        )
        document = StudioDocument(
            projections=(projection,),
            invoices=(
                invoice(2, TODAY, "2500", Invoice.Status.PAID),
                invoice(3, TODAY, "700"),
                invoice(4, start - timedelta(days=1), "900", Invoice.Status.PAID),
            ),
        )
        active = active_projection(document, TODAY)
        self.assertEqual(active, projection)
        progress = projection_progress(document, active)
        self.assertEqual(progress.achieved_revenue, Decimal("2500"))
        self.assertEqual(progress.revenue_pct, Decimal("25.0"))
        self.assertEqual(progress.achieved_clients, 1)
        self.assertEqual(progress.client_pct, Decimal("20.0"))

    def test_zero_targets_give_zero_percent(self):
        projection = Projection(id=1, start_date=TODAY, end_date=TODAY)
        document = StudioDocument(
            projections=(projection,),
            invoices=(invoice(2, TODAY, "5000", Invoice.Status.PAID),),
        )
        progress = projection_progress(document, projection)
        self.assertEqual(progress.achieved_revenue, Decimal("5000"))
        self.assertEqual(progress.revenue_pct, Decimal("0"))
        self.assertEqual(progress.client_pct, Decimal("0"))

    def test_first_matching_projection_wins(self):
        first = Projection(id=1, start_date=TODAY.replace(day=1), end_date=date(2026, 3, 31))
        second = Projection(id=2, start_date=date(2026, 1, 1), end_date=date(2026, 12, 31))
        expired = Projection(id=3, start_date=date(2025, 1, 1), end_date=date(2025, 12, 31))
        document = StudioDocument(projections=(expired, first, second))
        self.assertEqual(active_projection(document, TODAY).id, 1)
        self.assertIsNone(active_projection(StudioDocument(projections=(expired,)), TODAY))

    def test_dashboard_bundles_every_section(self):
        document = StudioDocument(invoices=(invoice(1, TODAY - timedelta(days=2), "300"),))
        sections = build_dashboard(document, TODAY)
        self.assertEqual(sections["overdueInvoicesTotal"], Decimal("300"))
        self.assertEqual(sections["pendingTotal"], Decimal("300"))
        self.assertIsNone(sections["activeProjection"])
        self.assertIsNone(sections["projectionProgress"])

    def test_overdue_invoices_total_counts_flagged_and_late(self):
        document = StudioDocument(
            invoices=(
                invoice(1, TODAY - timedelta(days=2), "300"),
                invoice(2, TODAY + timedelta(days=5), "120", Invoice.Status.OVERDUE),
                invoice(3, TODAY - timedelta(days=9), "999", Invoice.Status.PAID),
                invoice(4, TODAY, "50"),
            )
        )
        self.assertEqual(overdue_invoices_total(document, TODAY), Decimal("420"))
        self.assertEqual(overdue_invoices_total(StudioDocument(), TODAY), Decimal("0"))

    def test_client_label_falls_back_to_placeholder(self):
        document = StudioDocument(clients=(Client(id=1, name="Acme"),))
        self.assertEqual(client_label(document, 1), "Acme")
        self.assertEqual(client_label(document, 7), NO_CLIENT)
        self.assertEqual(client_label(document, None, "Unknown"), "Unknown")


class SearchTests(SimpleTestCase):
    def setUp(self):
        self.document = StudioDocument(
            clients=(
                Client(id=1, name="Acme Foods", brand="Crunchy", notes="Prefers reels"),
                Client(id=2, name="Bloom Studio", brand="Bloom"),
            ),
            planner=(
                planner_item(3, TODAY, title="Launch teaser", client_id=1),
                planner_item(4, TODAY, caption="Spring CRUNCH offer", client_id=2),
                planner_item(5, TODAY, title="Orphan", client_id=99),
            ),
            tasks=(
                Task(id=6, title="Shoot reels", assignee="Priya"),
                Task(id=7, title="Invoice follow-up", description="call acme"),
            ),
            invoices=(invoice(8, TODAY, "10", client_id=1), invoice(9, TODAY, "20", client_id=2)),
        )

    def test_blank_query_returns_nothing(self):
        for query in ("", "   ", None):
            results = search(self.document, query)
            self.assertEqual((results.clients, results.planner, results.tasks, results.invoices), ([], [], [], []))

    def test_matches_are_case_insensitive_and_keep_order(self):
        results = search(self.document, "  ACME ")
        self.assertEqual([c.id for c in results.clients], [1])
        self.assertEqual([p.id for p in results.planner], [3])
        self.assertEqual([t.id for t in results.tasks], [7])
        self.assertEqual([inv.id for inv in results.invoices], [8])

    def test_matches_planner_caption_and_client_fields(self):
        results = search(self.document, "crunch")
        self.assertEqual([c.id for c in results.clients], [1])
        self.assertEqual([p.id for p in results.planner], [4])
        self.assertEqual(results.total, 2)

    def test_task_assignee_is_searchable(self):
        results = search(self.document, "priya")
        self.assertEqual([t.id for t in results.tasks], [6])
        self.assertEqual(results.invoices, [])


class DocumentStorageTests(SimpleTestCase):
    def test_missing_document_loads_empty(self):
        document = load_document(None)
        self.assertEqual(document, StudioDocument())
        self.assertEqual(document.schema_version, SCHEMA_VERSION)

    def test_malformed_document_logs_and_loads_empty(self):
        with self.assertLogs("core.document", level="WARNING") as logs:
            document = load_document(b"{not json")
        self.assertEqual(document, StudioDocument())
        self.assertIn("Failed to parse stored document", logs.output[0])

    def test_non_object_document_loads_empty(self):
        with self.assertLogs("core.document", level="WARNING"):
            self.assertEqual(load_document(b"[1, 2, 3]"), StudioDocument())

    def test_legacy_document_is_migrated(self):
        legacy = {
            "clients": [{"id": 987654321, "name": "Acme", "retainer": 15000, "startDate": "2025-01-10"}],
            "planner": [
                {"id": 12, "clientId": 987654321, "date": "2026-03-14", "platform": "Instagram", "status": "planned"}
            ],
            "invoices": [{"id": 44, "clientId": 987654321, "month": "2026-03", "amount": 1000, "dueDate": "bad"}],
        }
        document = load_document(json.dumps(legacy))
        self.assertEqual(document.next_id, 987654322)
        self.assertEqual(document.clients[0].retainer, Decimal("15000"))
        self.assertEqual(document.clients[0].start_date, date(2025, 1, 10))
        self.assertEqual(document.planner[0].date, date(2026, 3, 14))
        self.assertIsNone(document.invoices[0].due_date)
        self.assertEqual(document.efforts, ())

    def test_round_trip_keeps_records_and_counter(self):
        document = StudioDocument(
            clients=(Client(id=1, name="Acme", retainer=Decimal("1200.50"), start_date=TODAY),),
            invoices=(invoice(2, TODAY, "99.90", Invoice.Status.PAID),),
            next_id=3,
        )
        payload = json.loads(dump_document(document))
        self.assertEqual(payload["schemaVersion"], SCHEMA_VERSION)
        self.assertEqual(payload["clients"][0]["startDate"], "2026-03-15")
        self.assertEqual(load_document(dump_document(document)), document)

    def test_non_mapping_records_are_skipped(self):
        raw = json.dumps({"schemaVersion": 1, "nextId": 5, "tasks": ["oops", {"id": 4, "title": "Keep"}]})
        with self.assertLogs("core.document", level="WARNING"):
            document = load_document(raw)
        self.assertEqual([task.title for task in document.tasks], ["Keep"])
        self.assertEqual(document.next_id, 5)

    def test_negative_schema_version_is_treated_as_legacy(self):
        document = load_document(json.dumps({"schemaVersion": -1, "clients": [{"id": 3, "name": "Acme"}]}))
        self.assertEqual(document.schema_version, SCHEMA_VERSION)
        self.assertEqual(document.clients[0].name, "Acme")
        self.assertEqual(document.next_id, 4)

    def test_non_list_collections_are_skipped(self):
        raw = json.dumps({"schemaVersion": 1, "clients": 5, "paymentsOut": "none", "tasks": [{"id": 2, "title": "Keep"}]})
        with self.assertLogs("core.document", level="WARNING") as logs:
            document = load_document(raw)
        self.assertEqual(document.clients, ())
        self.assertEqual(document.payments_out, ())
        self.assertEqual([task.title for task in document.tasks], ["Keep"])
        self.assertIn("Skipping clients", logs.output[0])

    def test_non_finite_and_negative_amounts_load_as_zero(self):
        raw = json.dumps(
            {
                "schemaVersion": 1,
                "clients": [{"id": 1, "name": "Acme", "retainer": "-5"}],
                "invoices": [{"id": 2, "clientId": 1, "amount": "NaN"}, {"id": 3, "clientId": 1, "amount": "Infinity"}],
            }
        )
        document = load_document(raw)
        self.assertEqual(document.clients[0].retainer, Decimal("0"))
        self.assertEqual([row.amount for row in document.invoices], [Decimal("0"), Decimal("0")])
        self.assertEqual(pending_total(document), Decimal("0"))


class StudioStateTests(SimpleTestCase):
    def test_first_open_writes_empty_document(self):
        store = MemoryStore()
        state = StudioState.open(store=store, today=TODAY, key="doc")
        self.assertEqual(state.document, StudioDocument())
        self.assertIsNotNone(store.get("doc"))

    def test_open_persists_normalized_statuses(self):
        stale = StudioDocument(planner=(planner_item(1, TODAY - timedelta(days=1)),), next_id=2)
        store = MemoryStore({"doc": dump_document(stale)})
        StudioState.open(store=store, today=TODAY, key="doc")
        reloaded = load_document(store.get("doc"))
        self.assertEqual(reloaded.planner[0].status, PlannerItem.Status.OVERDUE)

    def test_no_op_mutation_does_not_write(self):
        store = MemoryStore()
        state = StudioState.open(store=store, today=TODAY, key="doc")
        before = store.get("doc")

        def untouched(document, *, today):
            return document

        self.assertFalse(state.apply(untouched))
        self.assertIs(store.get("doc"), before)

    def test_effective_mutation_writes_new_document(self):
        store = MemoryStore()
        state = StudioState.open(store=store, today=TODAY, key="doc")

        def add_task(document, title, *, today):
            task_id, document = document.allocate_id()
            return document.append("tasks", Task(id=task_id, title=title, due_date=today))

        self.assertTrue(state.apply(add_task, "Write brief"))
        reloaded = load_document(store.get("doc"))
        self.assertEqual([(t.id, t.title, t.due_date) for t in reloaded.tasks], [(1, "Write brief", TODAY)])
        self.assertEqual(reloaded.next_id, 2)


class DatabaseStoreTests(TestCase):
    def test_get_and_set_round_trip(self):
        store = DatabaseStore()
        self.assertIsNone(store.get("studio"))
        store.set("studio", b'{"a": 1}')
        store.set("studio", b'{"a": 2}')
        self.assertEqual(store.get("studio"), b'{"a": 2}')
        self.assertEqual(StoredDocument.objects.filter(key="studio").count(), 1)


class DashboardViewTests(TestCase):
    def setUp(self):
        self.today = timezone.localdate()

    def test_dashboard_reports_overdue_collections(self):
        self.client.post("/clients/add", {"name": "Acme"})
        self.client.post(
            "/finance/invoices/add",
            {"client_id": "1", "amount": "1000", "due_date": (self.today - timedelta(days=1)).isoformat()},
        )
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(Decimal(payload["pendingTotal"]), Decimal("1000"))
        self.assertEqual(len(payload["overdueInvoices"]), 1)
        self.assertEqual(payload["overdueInvoices"][0]["clientName"], "Acme")
        self.assertEqual(payload["effortSummary"]["rows"], [])

    def test_dashboard_rejects_post(self):
        response = self.client.post("/")
        self.assertEqual(response.status_code, 405)

    def test_search_endpoint(self):
        self.client.post("/clients/add", {"name": "Bloom Studio", "brand": "Bloom"})
        response = self.client.get("/search/", {"q": "bloom"})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["total"], 1)
        self.assertEqual(payload["clients"][0]["name"], "Bloom Studio")
        self.assertEqual(self.client.get("/search/", {"q": " "}).json()["total"], 0)
