from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("core.urls")),
    path("clients/", include("clients.urls")),
    path("planner/", include("planner.urls")),
    path("efforts/", include("efforts.urls")),
    path("todo/", include("todo.urls")),
    path("finance/", include("finance_hub.urls")),
    path("projections/", include("projections.urls")),
]
