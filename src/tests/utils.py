"""Shared helpers for tests (accounts, articles, token settings)."""

from __future__ import annotations

import base64
import json
from typing import Iterable

from articles.models import Article
from authentication.models import Account, RoleType
from authentication.tokens import JwtSettings
from core.repository import Repository

TEST_JWT_SETTINGS = JwtSettings(
    signing_key="test-signing-key-0123456789abcdef0123456789",
    issuer="nblog-test",
    audience="nblog-test-clients",
    expiry_minutes=30,
)


def create_account(
    email: str,
    password: str = "Secret123",
    username: str = "writer",
    roles: Iterable[RoleType] = (RoleType.USER,),
) -> Account:
    """Create an account with a bcrypt-hashed password and the given roles."""

    account = Account.objects.create_account(username=username, email=email, password=password)
    for role in roles:
        Account.objects.add_to_role(account, role)
    return account


def create_article(
    owner: Account,
    title: str = "A title",
    sub_heading: str = "A sub-heading",
    content: str = "Some content.",
) -> Article:
    """Persist an article through the repository so the audit hook stamps it."""

    article = Article(title=title, sub_heading=sub_heading, content=content, owner=owner)
    if not Repository(Article).add(article):
        raise AssertionError("article fixture could not be saved")
    return article


def tamper_claim(token: str, claim: str, value) -> str:
    """Rewrite one claim of a signed token while keeping the old signature."""

    header, payload, signature = token.split(".")
    padded = payload + "=" * (-len(payload) % 4)
    claims = json.loads(base64.urlsafe_b64decode(padded))
    claims[claim] = value
    encoded = base64.urlsafe_b64encode(json.dumps(claims).encode()).rstrip(b"=").decode()
    return ".".join([header, encoded, signature])
