from django.urls import path

from . import views

urlpatterns = [
    path("", views.projection_wall, name="projections-wall"),
    path("add", views.add_projection, name="projections-add"),
]
