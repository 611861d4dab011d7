"""Account, Role and role-assignment models.

Passwords are stored only as bcrypt hashes in ``password_hash``. Django's
built-in groups/permissions (``PermissionsMixin``) are not used; roles live
in our own ``Role`` table and are linked through ``AccountRole``.
"""

from typing import ClassVar

from django.contrib.auth.models import AbstractBaseUser
from django.db import models

from .managers import AccountManager


class RoleType(models.IntegerChoices):
    """Coarse permission tags with stable numeric ids."""

    ADMIN = 1, "Admin"
    USER = 2, "User"


class Role(models.Model):
    """A seeded role row; see migration 0002. Never edited at runtime."""

    id = models.PositiveSmallIntegerField(primary_key=True, choices=RoleType.choices)
    name = models.CharField(max_length=50, unique=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name


class Account(AbstractBaseUser):
    """Registered user identified by email, owning articles and holding roles."""

    id = models.BigAutoField(primary_key=True)
    username = models.CharField(max_length=50)
    email = models.EmailField(unique=True)
    password_hash = models.CharField(max_length=128)
    date_joined = models.DateTimeField(auto_now_add=True)
    roles = models.ManyToManyField(Role, through="AccountRole", related_name="accounts")

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS: ClassVar[list[str]] = ["username"]

    objects = AccountManager()

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.email

    def set_password(self, raw_password):  # type: ignore[override]
        """Override to ensure bcrypt hashing via manager utility."""

        self.password_hash = "" if raw_password is None else AccountManager.hash_password(raw_password)

    def check_password(self, raw_password) -> bool:  # type: ignore[override]
        if raw_password is None:
            return False
        return AccountManager.verify_password(self, raw_password)

    def role_names(self) -> list[str]:
        """Names of assigned roles, ordered by role id."""

        return list(self.roles.order_by("id").values_list("name", flat=True))


class AccountRole(models.Model):
    """Assignment of one role to one account."""

    account = models.ForeignKey(Account, on_delete=models.CASCADE, related_name="role_links")
    role = models.ForeignKey(Role, on_delete=models.PROTECT, related_name="account_links")

    class Meta:
        unique_together = ("account", "role")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.account_id} -> {self.role_id}"


__all__ = ["Account", "AccountRole", "Role", "RoleType"]
