"""Root URL configuration for the NBlog API."""
from django.urls import include, path

urlpatterns = [
    path("auth/", include("authentication.urls")),
    path("article/", include("articles.urls")),
]
