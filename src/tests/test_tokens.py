"""Tests for token issuance and verification."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from django.test import SimpleTestCase, override_settings
from rest_framework.exceptions import AuthenticationFailed

from authentication.tokens import TokenService, get_jwt_settings
from tests.utils import TEST_JWT_SETTINGS, tamper_claim


class TokenServiceTests(SimpleTestCase):
    def setUp(self):
        self.service = TokenService(TEST_JWT_SETTINGS)
        self.account = SimpleNamespace(id=7, email="writer@example.com")

    def test_round_trip_carries_claims(self):
        """A fresh token decodes back to the account, roles and expiry."""
        now = datetime.now(timezone.utc).replace(microsecond=0)
        token = self.service.generate_token(self.account, ["Admin", "User"], now=now)

        claims = self.service.decode_token(token)

        self.assertEqual(token.count("."), 2)
        self.assertEqual(claims.subject, "7")
        self.assertEqual(claims.account_id, 7)
        self.assertEqual(claims.email, "writer@example.com")
        self.assertEqual(claims.roles, ("Admin", "User"))
        self.assertEqual(claims.expires_at, now + timedelta(minutes=TEST_JWT_SETTINGS.expiry_minutes))

    def test_tampered_claims_are_rejected(self):
        """Changing any claim invalidates the signature."""
        token = self.service.generate_token(self.account, ["User"])

        for claim, value in (("sub", "8"), ("role", "Admin"), ("email", "x@example.com")):
            with self.subTest(claim=claim):
                with self.assertRaises(AuthenticationFailed):
                    self.service.decode_token(tamper_claim(token, claim, value))

    def test_expired_token_is_rejected(self):
        """Tokens past their expiry fail with a dedicated message."""
        issued = datetime.now(timezone.utc) - timedelta(minutes=TEST_JWT_SETTINGS.expiry_minutes + 1)
        token = self.service.generate_token(self.account, ["User"], now=issued)

        with self.assertRaises(AuthenticationFailed) as ctx:
            self.service.decode_token(token)

        self.assertEqual(str(ctx.exception.detail), "Token has expired")

    def test_other_key_issuer_or_audience_is_rejected(self):
        """A verifier with a different key, issuer or audience refuses the token."""
        token = self.service.generate_token(self.account, ["User"])
        variants = {
            "key": replace(TEST_JWT_SETTINGS, signing_key="another-signing-key-0123456789abcdef0123"),
            "issuer": replace(TEST_JWT_SETTINGS, issuer="someone-else"),
            "audience": replace(TEST_JWT_SETTINGS, audience="other-clients"),
        }
        for name, jwt_settings in variants.items():
            with self.subTest(mismatch=name):
                with self.assertRaises(AuthenticationFailed):
                    TokenService(jwt_settings).decode_token(token)

    def test_garbage_is_rejected(self):
        """A string that is not a JWT is refused."""
        with self.assertRaises(AuthenticationFailed):
            self.service.decode_token("not-a-token")

    def test_account_without_roles_gets_empty_role_claim(self):
        """An account holding no roles decodes to an empty role tuple."""
        claims = self.service.decode_token(self.service.generate_token(self.account, []))

        self.assertEqual(claims.roles, ())


class JwtSettingsCacheTests(SimpleTestCase):
    def test_default_settings_are_read_once(self):
        """Services built without settings share one cached configuration."""
        self.assertIs(TokenService().jwt_settings, TokenService().jwt_settings)
        self.assertIs(TokenService().jwt_settings, get_jwt_settings())

    def test_changed_jwt_setting_reloads_configuration(self):
        """Overriding a JWT setting drops the cached configuration."""
        with override_settings(JWT_ISSUER="other-issuer"):
            self.assertEqual(TokenService().jwt_settings.issuer, "other-issuer")

        self.assertNotEqual(TokenService().jwt_settings.issuer, "other-issuer")
