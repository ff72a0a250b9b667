from django.urls import include, path

urlpatterns = [
    path("api/", include("tickets.urls")),
    path("api/", include("salary.urls")),
]
