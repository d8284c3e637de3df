from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from common.coerce import month_bounds
from core.document import StudioDocument

from .records import Projection
from .services import add_projection


class AddProjectionTests(SimpleTestCase):
    def test_targets_default_to_zero(self):
        document = add_projection(StudioDocument(), {"start_date": "2026-03-01", "end_date": "2026-03-31"})
        projection = document.projections[0]
        self.assertEqual(projection.type, Projection.Type.MONTHLY)
        self.assertEqual(projection.revenue_target, Decimal("0"))
        self.assertEqual(projection.client_target, 0)
        self.assertTrue(projection.covers(date(2026, 3, 31)))
        self.assertFalse(projection.covers(date(2026, 4, 1)))

    def test_dates_are_required_and_ordered(self):
        original = StudioDocument()
        for data in (
            {"start_date": "2026-03-01"},
            {"end_date": "2026-03-31"},
            {"start_date": "2026-04-01", "end_date": "2026-03-01"},
        ):
            self.assertIs(add_projection(original, data), original)

    def test_single_day_projection_is_valid(self):
        document = add_projection(StudioDocument(), {"start_date": "2026-03-01", "end_date": "2026-03-01"})
        self.assertEqual(len(document.projections), 1)


class ProjectionViewsTests(TestCase):
    def test_wall_shows_progress_of_active_projection(self):
        today = timezone.localdate()
        start, end = month_bounds(today)
        response = self.client.post(
            "/projections/add",
            {
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "type": "monthly",
                "revenue_target": "10000",
                "client_target": "5",
            },
        )
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/projections/")
        self.client.post("/clients/add", {"name": "Acme"})
        self.client.post("/finance/invoices/add", {"client_id": "2", "amount": "2500", "due_date": today.isoformat()})
        self.client.post("/finance/invoices/paid", {"id": "3"})

        payload = self.client.get("/projections/").json()
        self.assertEqual(payload["active"]["id"], 1)
        self.assertEqual(Decimal(payload["progress"]["achievedRevenue"]), Decimal("2500"))
        self.assertEqual(payload["progress"]["revenuePct"], "25.0")
        self.assertEqual(payload["progress"]["achievedClients"], 1)
        self.assertEqual(payload["progress"]["clientPct"], "20.0")

    def test_wall_without_active_projection(self):
        payload = self.client.get("/projections/").json()
        self.assertEqual(payload["projections"], [])
        self.assertIsNone(payload["active"])
        self.assertIsNone(payload["progress"])
