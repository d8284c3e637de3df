from datetime import date, timedelta

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from core.document import StudioDocument

from .records import ContentType, Platform, PlannerItem
from .services import add_planner_item, mark_planner_status, upsert_planner_item

TODAY = date(2026, 3, 15)


class PlannerMutatorTests(SimpleTestCase):
    def test_add_uses_defaults_and_planned_status(self):
        document = add_planner_item(
            StudioDocument(),
            {"client_id": "7", "date": "2026-03-20", "title": "Teaser", "status": "done"},
        )
        item = document.planner[0]
        self.assertEqual(item.client_id, 7)
        self.assertEqual(item.date, date(2026, 3, 20))
        self.assertEqual(item.platform, Platform.INSTAGRAM)
        self.assertEqual(item.type, ContentType.POST)
        self.assertEqual(item.status, PlannerItem.Status.PLANNED)

    def test_client_and_date_are_required(self):
        original = StudioDocument()
        for data in ({"date": "2026-03-20"}, {"client_id": "7"}, {"client_id": "7", "date": "not-a-date"}):
            self.assertIs(add_planner_item(original, data), original)

    def test_unknown_platform_is_rejected(self):
        original = StudioDocument()
        data = {"client_id": "7", "date": "2026-03-20", "platform": "MySpace"}
        self.assertIs(add_planner_item(original, data), original)

    def test_upsert_replaces_existing_record(self):
        document = add_planner_item(StudioDocument(), {"client_id": "1", "date": "2026-03-20", "title": "Old"})
        updated = upsert_planner_item(
            document,
            {"id": "1", "client_id": "1", "date": "2026-03-21", "title": "New", "type": "Reel", "status": "done"},
        )
        self.assertEqual(len(updated.planner), 1)
        item = updated.planner[0]
        self.assertEqual((item.id, item.title, item.type, item.status), (1, "New", "Reel", "done"))
        self.assertEqual(item.date, date(2026, 3, 21))

    def test_upsert_appends_unknown_id_with_fresh_id(self):
        document = add_planner_item(StudioDocument(), {"client_id": "1", "date": "2026-03-20"})
        updated = upsert_planner_item(document, {"id": "99", "client_id": "1", "date": "2026-03-22"})
        self.assertEqual([item.id for item in updated.planner], [1, 2])

    def test_mark_status(self):
        document = add_planner_item(StudioDocument(), {"client_id": "1", "date": "2026-03-20"})
        updated = mark_planner_status(document, {"id": "1", "status": "skipped"})
        self.assertEqual(updated.planner[0].status, PlannerItem.Status.SKIPPED)
        self.assertIs(mark_planner_status(document, {"id": "1", "status": "archived"}), document)
        self.assertIs(mark_planner_status(document, {"id": "5", "status": "done"}), document)


class PlannerViewsTests(TestCase):
    def test_month_view_lists_current_month_sorted(self):
        today = timezone.localdate()
        start = today.replace(day=1)
        self.client.post("/clients/add", {"name": "Acme"})
        for offset, title in ((2, "Later"), (0, "First")):
            response = self.client.post(
                "/planner/add",
                {"client_id": "1", "date": (start + timedelta(days=offset)).isoformat(), "title": title},
            )
            self.assertEqual(response.status_code, 302)
            self.assertEqual(response.url, "/planner/")
        self.client.post(
            "/planner/add",
            {"client_id": "1", "date": (start - timedelta(days=1)).isoformat(), "title": "Last month"},
        )
        payload = self.client.get("/planner/").json()
        self.assertEqual([item["title"] for item in payload["items"]], ["First", "Later"])
        self.assertEqual(payload["count"], 2)
        self.assertEqual(payload["items"][0]["clientName"], "Acme")

    def test_mark_done(self):
        today = timezone.localdate()
        self.client.post("/planner/add", {"client_id": "3", "date": today.isoformat(), "title": "Today"})
        self.client.post("/planner/status", {"id": "1", "status": "done"})
        item = self.client.get("/planner/").json()["items"][0]
        self.assertEqual(item["status"], "done")
        self.assertEqual(item["clientName"], "-")

    def test_add_always_starts_planned(self):
        today = timezone.localdate()
        self.client.post("/planner/add", {"client_id": "1", "date": today.isoformat(), "title": "Reel", "status": "done"})
        item = self.client.get("/planner/").json()["items"][0]
        self.assertEqual(item["status"], "planned")

    def test_update_replaces_existing_item(self):
        today = timezone.localdate()
        self.client.post("/planner/add", {"client_id": "1", "date": today.isoformat(), "title": "Draft"})
        response = self.client.post(
            "/planner/update",
            {"id": "1", "client_id": "1", "date": today.isoformat(), "title": "Final", "status": "skipped"},
        )
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/planner/")
        items = self.client.get("/planner/").json()["items"]
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0]["id"], 1)
        self.assertEqual(items[0]["title"], "Final")
        self.assertEqual(items[0]["status"], "skipped")
