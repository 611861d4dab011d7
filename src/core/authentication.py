"""DRF authenticator surfacing the account attached by ``JWTAuthMiddleware``."""

from typing import Any, Optional, Tuple

from django.contrib.auth.models import AnonymousUser
from rest_framework.authentication import BaseAuthentication


class MiddlewareUserAuthentication(BaseAuthentication):
    """Expose ``request._request.user`` (set by middleware) to DRF.

    No token parsing happens here; the middleware has already verified the
    bearer token and loaded the account. The verified claims are returned as
    ``request.auth``. Anonymous requests are left unauthenticated.
    """

    def authenticate(self, request) -> Optional[Tuple[Any, Any]]:
        django_request = getattr(request, "_request", None)
        if django_request is None:
            return None

        account = getattr(django_request, "user", None)
        if account is None or isinstance(account, AnonymousUser):
            return None

        return account, getattr(django_request, "token_claims", None)

    def authenticate_header(self, request) -> str:
        return "Bearer"


__all__ = ["MiddlewareUserAuthentication"]
