from django.urls import path

from . import views

urlpatterns = [
    path("", views.dashboard, name="core-dashboard"),
    path("search/", views.search, name="core-search"),
]
