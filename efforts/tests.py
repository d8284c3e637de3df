from datetime import date, timedelta

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from core.document import StudioDocument

from .services import add_effort


class AddEffortTests(SimpleTestCase):
    def test_counts_default_to_zero(self):
        document = add_effort(StudioDocument(), {"client_id": "4", "date": "2026-03-15", "minutes": "45"})
        log = document.efforts[0]
        self.assertEqual((log.client_id, log.date), (4, date(2026, 3, 15)))
        self.assertEqual((log.posts, log.reels, log.minutes), (0, 0, 45))

    def test_missing_client_or_date_is_ignored(self):
        original = StudioDocument()
        for data in ({"date": "2026-03-15", "minutes": "10"}, {"client_id": "4", "minutes": "10"}):
            self.assertIs(add_effort(original, data), original)

    def test_negative_counts_are_ignored(self):
        original = StudioDocument()
        data = {"client_id": "4", "date": "2026-03-15", "minutes": "-10"}
        self.assertIs(add_effort(original, data), original)


class EffortViewsTests(TestCase):
    def test_recent_logs_are_newest_first(self):
        today = timezone.localdate()
        self.client.post("/clients/add", {"name": "Acme"})
        for offset in (5, 0, 2):
            response = self.client.post(
                "/efforts/add",
                {"client_id": "1", "date": (today - timedelta(days=offset)).isoformat(), "posts": "1", "minutes": "30"},
            )
            self.assertEqual(response.status_code, 302)
            self.assertEqual(response.url, "/efforts/")
        payload = self.client.get("/efforts/").json()
        self.assertEqual(
            [row["date"] for row in payload["efforts"]],
            [(today - timedelta(days=offset)).isoformat() for offset in (0, 2, 5)],
        )
        self.assertEqual(payload["efforts"][0]["clientName"], "Acme")

    def test_logged_minutes_feed_the_dashboard(self):
        today = timezone.localdate().isoformat()
        self.client.post("/clients/add", {"name": "Alpha"})
        self.client.post("/clients/add", {"name": "Beta"})
        self.client.post("/efforts/add", {"client_id": "1", "date": today, "minutes": "30"})
        self.client.post("/efforts/add", {"client_id": "2", "date": today, "minutes": "70"})
        summary = self.client.get("/").json()["effortSummary"]
        self.assertEqual([(row["name"], row["pct"]) for row in summary["rows"]], [("Beta", "70.0"), ("Alpha", "30.0")])
        self.assertEqual(summary["top"]["name"], "Beta")
