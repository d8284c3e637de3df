from django.urls import path

from . import views

urlpatterns = [
    path("", views.dashboard, name="todo-dashboard"),
    path("add", views.add_task, name="todo-add"),
    path("status", views.update_status, name="todo-status"),
]
