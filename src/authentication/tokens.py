"""Signed access tokens carrying account and role claims."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Iterable

import jwt
from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from rest_framework.exceptions import AuthenticationFailed

ROLE_SEPARATOR = ","


@dataclass(frozen=True)
class JwtSettings:
    """Token configuration, read from Django settings once and never mutated."""

    signing_key: str
    issuer: str
    audience: str
    expiry_minutes: int
    leeway_seconds: int = 0
    algorithm: str = "HS256"

    @classmethod
    def from_settings(cls) -> "JwtSettings":
        return cls(
            signing_key=settings.JWT_SIGNING_KEY,
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            expiry_minutes=settings.JWT_EXPIRY_MINUTES,
            leeway_seconds=getattr(settings, "JWT_LEEWAY_SECONDS", 0),
        )

    @property
    def ttl(self) -> timedelta:
        return timedelta(minutes=self.expiry_minutes)


@lru_cache(maxsize=1)
def get_jwt_settings() -> JwtSettings:
    """Token configuration shared by every TokenService built without one."""
    return JwtSettings.from_settings()


@receiver(setting_changed)
def _reload_jwt_settings(*, setting, **kwargs):
    if setting.startswith("JWT_"):
        get_jwt_settings.cache_clear()


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of an access token."""

    subject: str
    email: str
    roles: tuple[str, ...]
    expires_at: datetime

    @property
    def account_id(self) -> int:
        return int(self.subject)


class TokenService:
    """Issue and verify HS256 tokens with issuer, audience and expiry."""

    def __init__(self, jwt_settings: JwtSettings | None = None):
        self.jwt_settings = jwt_settings or get_jwt_settings()

    def generate_token(self, account, roles: Iterable[str], now: datetime | None = None) -> str:
        """Sign a token for ``account`` holding its comma-joined role names."""

        issued_at = now or datetime.now(timezone.utc)
        payload = self._build_payload(account, roles, issued_at)
        return jwt.encode(payload, self.jwt_settings.signing_key, algorithm=self.jwt_settings.algorithm)

    def _build_payload(self, account, roles: Iterable[str], issued_at: datetime) -> dict[str, Any]:
        exp = issued_at + self.jwt_settings.ttl
        return {
            "sub": str(account.id),
            "email": account.email,
            "role": ROLE_SEPARATOR.join(roles),
            "iss": self.jwt_settings.issuer,
            "aud": self.jwt_settings.audience,
            "iat": int(issued_at.timestamp()),
            "exp": int(exp.timestamp()),
        }

    def decode_token(self, token: str) -> TokenClaims:
        """Verify signature, issuer, audience and expiry, then return the claims."""

        try:
            payload = jwt.decode(
                token,
                self.jwt_settings.signing_key,
                algorithms=[self.jwt_settings.algorithm],
                audience=self.jwt_settings.audience,
                issuer=self.jwt_settings.issuer,
                leeway=self.jwt_settings.leeway_seconds,
                options={"require": ["sub", "exp", "iss", "aud"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationFailed("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationFailed("Invalid token") from exc

        role = payload.get("role") or ""
        return TokenClaims(
            subject=str(payload["sub"]),
            email=payload.get("email", ""),
            roles=tuple(r for r in role.split(ROLE_SEPARATOR) if r),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


__all__ = ["JwtSettings", "TokenClaims", "TokenService", "get_jwt_settings"]
