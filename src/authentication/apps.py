"""App configuration for authentication components."""

from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    """Authentication app holds accounts, roles, tokens and the auth service."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"
