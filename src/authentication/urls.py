"""URL patterns for account endpoints."""

from django.urls import path

from .views import AccountListView, DeleteAccountView, LoginView, RegisterView

urlpatterns = [
    path("all", AccountListView.as_view(), name="auth-all"),
    path("register", RegisterView.as_view(), name="auth-register"),
    path("login", LoginView.as_view(), name="auth-login"),
    path("delete/<str:account_id>", DeleteAccountView.as_view(), name="auth-delete"),
]
