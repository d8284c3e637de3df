from datetime import date, timedelta
from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from core.document import StudioDocument

from .records import Invoice
from .services import add_invoice, mark_invoice_paid

TODAY = date(2026, 3, 15)


class InvoiceMutatorTests(SimpleTestCase):
    def test_add_invoice_defaults_to_current_month_and_today(self):
        document = add_invoice(StudioDocument(), {"client_id": "2", "amount": "1500"}, today=TODAY)
        invoice = document.invoices[0]
        self.assertEqual(invoice.month, "2026-03")
        self.assertEqual(invoice.due_date, TODAY)
        self.assertEqual(invoice.amount, Decimal("1500"))
        self.assertEqual(invoice.status, Invoice.Status.PENDING)
        self.assertIsNone(invoice.paid_date)

    def test_client_and_amount_are_required(self):
        original = StudioDocument()
        for data in (
            {"amount": "100"},
            {"client_id": "2"},
            {"client_id": "2", "amount": "-1"},
            {"client_id": "2", "amount": "100", "month": "2026-13"},
        ):
            self.assertIs(add_invoice(original, data, today=TODAY), original)

    def test_zero_amount_is_accepted(self):
        document = add_invoice(StudioDocument(), {"client_id": "2", "amount": "0"}, today=TODAY)
        self.assertEqual(document.invoices[0].amount, Decimal("0"))

    def test_mark_paid_sets_paid_date(self):
        document = add_invoice(StudioDocument(), {"client_id": "2", "amount": "10"}, today=TODAY)
        paid_on = TODAY + timedelta(days=3)
        updated = mark_invoice_paid(document, {"id": "1"}, today=paid_on)
        self.assertEqual(updated.invoices[0].status, Invoice.Status.PAID)
        self.assertEqual(updated.invoices[0].paid_date, paid_on)
        self.assertIs(mark_invoice_paid(document, {"id": "9"}, today=paid_on), document)


class FinanceViewsTests(TestCase):
    def test_ledger_sorted_by_due_date_with_totals(self):
        today = timezone.localdate()
        self.client.post("/clients/add", {"name": "Acme"})
        for offset, amount in ((10, "300"), (-2, "200"), (3, "100")):
            response = self.client.post(
                "/finance/invoices/add",
                {"client_id": "1", "amount": amount, "due_date": (today + timedelta(days=offset)).isoformat()},
            )
            self.assertEqual(response.status_code, 302)
            self.assertEqual(response.url, "/finance/")
        self.client.post("/finance/invoices/paid", {"id": "2"})

        payload = self.client.get("/finance/").json()
        self.assertEqual([Decimal(row["amount"]) for row in payload["invoices"]], [200, 100, 300])
        self.assertEqual([row["status"] for row in payload["invoices"]], ["overdue", "pending", "paid"])
        self.assertEqual(payload["invoices"][2]["paidDate"], today.isoformat())
        self.assertEqual(Decimal(payload["pendingTotal"]), Decimal("300"))
        self.assertEqual(Decimal(payload["overdueTotal"]), Decimal("200"))
        self.assertEqual(payload["overdueCount"], 1)
