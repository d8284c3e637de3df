from datetime import date
from decimal import Decimal

from django.test import Client as HttpClient
from django.test import SimpleTestCase, TestCase

from core.document import StudioDocument

from .records import ClientStatus
from .services import add_client, update_client_field

TODAY = date(2026, 3, 15)


class AddClientTests(SimpleTestCase):
    def test_creates_active_client_starting_today(self):
        document = add_client(
            StudioDocument(),
            {"name": "  Acme Foods ", "brand": " Crunchy ", "retainer": "15000", "notes": " keeps spaces "},
            today=TODAY,
        )
        client = document.clients[0]
        self.assertEqual(client.id, 1)
        self.assertEqual(client.name, "Acme Foods")
        self.assertEqual(client.brand, "Crunchy")
        self.assertEqual(client.retainer, Decimal("15000"))
        self.assertEqual(client.start_date, TODAY)
        self.assertEqual(client.status, ClientStatus.ACTIVE)
        self.assertEqual(client.notes, " keeps spaces ")
        self.assertEqual(document.next_id, 2)

    def test_retainer_defaults_to_zero(self):
        document = add_client(StudioDocument(), {"name": "Bloom"}, today=TODAY)
        self.assertEqual(document.clients[0].retainer, Decimal("0"))

    def test_blank_name_is_ignored(self):
        original = StudioDocument()
        for data in ({"name": ""}, {"name": "   "}, {}):
            self.assertIs(add_client(original, data, today=TODAY), original)

    def test_negative_retainer_is_ignored(self):
        original = StudioDocument()
        self.assertIs(add_client(original, {"name": "Acme", "retainer": "-5"}, today=TODAY), original)

    def test_clients_are_appended_in_order(self):
        document = add_client(StudioDocument(), {"name": "First"}, today=TODAY)
        document = add_client(document, {"name": "Second"}, today=TODAY)
        self.assertEqual([(c.id, c.name) for c in document.clients], [(1, "First"), (2, "Second")])


class UpdateClientFieldTests(SimpleTestCase):
    def setUp(self):
        self.document = add_client(StudioDocument(), {"name": "Acme"}, today=TODAY)

    def test_patches_a_single_field(self):
        updated = update_client_field(self.document, {"id": "1", "field": "status", "value": "paused"})
        self.assertEqual(updated.clients[0].status, ClientStatus.PAUSED)
        self.assertEqual(updated.clients[0].name, "Acme")

    def test_retainer_is_parsed(self):
        updated = update_client_field(self.document, {"id": "1", "field": "retainer", "value": "2500.50"})
        self.assertEqual(updated.clients[0].retainer, Decimal("2500.50"))

    def test_invalid_patches_are_ignored(self):
        for data in (
            {"id": "1", "field": "name", "value": "  "},
            {"id": "1", "field": "status", "value": "deleted"},
            {"id": "1", "field": "retainer", "value": "lots"},
            {"id": "1", "field": "start_date", "value": "2020-01-01"},
            {"id": "42", "field": "name", "value": "Ghost"},
        ):
            self.assertIs(update_client_field(self.document, data), self.document, data)


class ClientViewsTests(TestCase):
    def test_add_and_list_clients(self):
        response = self.client.post("/clients/add", {"name": "Acme", "brand": "Crunchy", "retainer": "1000"})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/clients/")
        payload = self.client.get("/clients/").json()
        self.assertEqual(len(payload["clients"]), 1)
        self.assertEqual(payload["clients"][0]["name"], "Acme")
        self.assertEqual(payload["clients"][0]["status"], "active")

    def test_invalid_submission_creates_nothing(self):
        response = self.client.post("/clients/add", {"name": " "})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(self.client.get("/clients/").json()["clients"], [])

    def test_get_on_add_redirects_to_list(self):
        response = self.client.get("/clients/add")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/clients/")

    def test_update_client_name(self):
        self.client.post("/clients/add", {"name": "Acme"})
        self.client.post("/clients/update", {"id": "1", "field": "name", "value": "Acme Foods"})
        self.assertEqual(self.client.get("/clients/").json()["clients"][0]["name"], "Acme Foods")

    def test_list_sets_csrf_cookie_for_browser_posts(self):
        browser = HttpClient(enforce_csrf_checks=True)
        self.assertEqual(browser.post("/clients/add", {"name": "Acme"}).status_code, 403)
        browser.get("/clients/")
        token = browser.cookies["csrftoken"].value
        response = browser.post("/clients/add", {"name": "Acme", "csrfmiddlewaretoken": token})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(browser.get("/clients/").json()["clients"][0]["name"], "Acme")
