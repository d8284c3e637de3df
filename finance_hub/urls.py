from django.urls import path

from . import views

urlpatterns = [
    path("", views.ledger, name="finance-ledger"),
    path("invoices/add", views.add_invoice, name="finance-invoices-add"),
    path("invoices/paid", views.mark_paid, name="finance-invoices-paid"),
]
