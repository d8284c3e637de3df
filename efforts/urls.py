from django.urls import path

from . import views

urlpatterns = [
    path("", views.effort_list, name="efforts-list"),
    path("add", views.add_effort, name="efforts-add"),
]
