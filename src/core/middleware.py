"""Middleware to authenticate requests via a bearer JWT."""

import logging
from typing import Optional

from django.contrib.auth.models import AnonymousUser
from django.utils.deprecation import MiddlewareMixin
from rest_framework.exceptions import AuthenticationFailed

from authentication.models import Account
from authentication.tokens import TokenService

logger = logging.getLogger(__name__)


class JWTAuthMiddleware(MiddlewareMixin):
    """Verify an optional bearer token and attach the account as request.user.

    A missing, invalid or expired token, or one naming an account that no
    longer exists, leaves the request anonymous. Views that need an owner
    answer 401 themselves; every other route runs as usual.
    """

    def process_request(self, request):  # type: ignore[override]
        request.user = AnonymousUser()

        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth_header or not auth_header.startswith("Bearer "):
            return None

        token = auth_header.split(" ", 1)[1]

        try:
            claims = TokenService().decode_token(token)
        except AuthenticationFailed as exc:
            logger.info("Ignoring bearer token: %s", exc.detail)
            return None

        account = self._get_account(claims.subject)
        if account is None:
            logger.info("Ignoring bearer token for unknown account %s", claims.subject)
            return None

        request.user = account
        request.token_claims = claims
        return None

    @staticmethod
    def _get_account(subject: Optional[str]) -> Optional[Account]:
        if not subject or not subject.isdigit():
            return None
        return Account.objects.filter(pk=int(subject)).first()


__all__ = ["JWTAuthMiddleware"]
