from django.urls import path

from . import views

urlpatterns = [
    path("", views.month_view, name="planner-month"),
    path("add", views.add_item, name="planner-add"),
    path("update", views.upsert_item, name="planner-update"),
    path("status", views.mark_status, name="planner-status"),
]
