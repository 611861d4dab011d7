"""Account manager handling bcrypt hashing, lookup and role assignment."""

import bcrypt
from django.contrib.auth.base_user import BaseUserManager
from django.db import transaction


class AccountManager(BaseUserManager):
    """Manager creating accounts with bcrypt password hashes."""

    use_in_migrations = True

    def create_account(self, username: str, email: str, password: str | None):
        """Create an account with a hashed password.

        Raises ``ValueError`` for a missing email or password and lets the
        database's ``IntegrityError`` propagate on a duplicate email.
        """
        if not email:
            raise ValueError("The Email must be set")
        if not password:
            raise ValueError("Password must be provided")
        account = self.model(username=username, email=self.normalize_email(email))
        account.password_hash = self.hash_password(password)
        with transaction.atomic(using=self._db):
            account.save(using=self._db)
        return account

    def create_user(self, email: str, password: str | None = None, **extra_fields):
        """Entry point used by Django's auth tooling."""
        return self.create_account(extra_fields.pop("username", ""), email, password)

    def find_by_email(self, email: str):
        """Return the account registered under ``email`` (case-insensitive) or None."""
        if not email:
            return None
        return self.filter(email__iexact=email.strip()).first()

    def add_to_role(self, account, role_type) -> None:
        """Assign a seeded role to ``account``.

        Raises ``Role.DoesNotExist`` when the roles were never seeded.
        """
        from .models import AccountRole, Role

        role = Role.objects.using(self._db).get(pk=role_type)
        AccountRole.objects.using(self._db).get_or_create(account=account, role=role)

    @staticmethod
    def hash_password(raw_password: str) -> str:
        """Hash a raw password using bcrypt and return the utf-8 string."""
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(raw_password.encode(), salt)
        return hashed.decode()

    @staticmethod
    def verify_password(account, raw_password: str) -> bool:
        """Verify raw password against stored bcrypt hash."""

        if not account.password_hash:
            return False
        try:
            return bcrypt.checkpw(raw_password.encode(), account.password_hash.encode("utf-8"))
        except ValueError:
            # Over-long input or a malformed stored hash never matches.
            return False


__all__ = ["AccountManager"]
