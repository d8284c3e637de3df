from django.urls import path

from . import views

urlpatterns = [
    path("", views.client_list, name="clients-list"),
    path("add", views.add_client, name="clients-add"),
    path("update", views.update_client, name="clients-update"),
]
