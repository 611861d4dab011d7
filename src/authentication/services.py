"""Account registration, login and deletion.

Every public method returns a ``core.result`` value and never lets an
exception escape: unexpected faults are logged and reported as 500.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db import DatabaseError, IntegrityError
from rest_framework import status

from core.exceptions import StorageError
from core.repository import Repository
from core.result import Failure, Result, failure, success
from core.validation import run_validator

from .models import Account, Role, RoleType
from .serializers import AccountSerializer
from .tokens import TokenService
from .validators import LoginValidator, RegisterValidator

logger = logging.getLogger(__name__)

DEFAULT_ROLE = RoleType.USER


class AuthService:
    """Credential workflows over the account store and the token service."""

    def __init__(
        self,
        accounts: Repository[Account, int] | None = None,
        tokens: TokenService | None = None,
    ):
        self.accounts = accounts if accounts is not None else Repository(Account)
        self.tokens = tokens if tokens is not None else TokenService()

    @property
    def _store(self):
        return Account.objects.db_manager(self.accounts.unit_of_work.using)

    def get_all_accounts(self) -> Result[list[dict[str, Any]]]:
        try:
            accounts = self.accounts.fetch_all()
            return success(AccountSerializer(accounts, many=True).data)
        except StorageError:
            return Failure.storage("Error occurred while fetching users")
        except Exception:
            logger.exception("Error occurred while fetching users")
            return Failure.unexpected("Error occurred while fetching users")

    def register(self, data: Mapping[str, Any]) -> Result[None]:
        """Create an account holding the default role.

        Outcomes: 400 invalid payload, 400 email already on file, 400 when
        the store refuses the account, 500 when the account was created but
        the default role could not be assigned, 201 on success.
        """
        try:
            outcome = run_validator(RegisterValidator, data)
            if not outcome.is_valid:
                return Failure.validation(outcome.errors)

            payload = outcome.data
            if self._store.find_by_email(payload["email"]) is not None:
                return Failure.conflict("Email already exists")

            try:
                account = self._store.create_account(
                    username=payload["username"],
                    email=payload["email"],
                    password=payload["password"],
                )
            except (ValueError, IntegrityError):
                logger.warning("Account store rejected registration", exc_info=True)
                return failure(status.HTTP_400_BAD_REQUEST, "Could not create user")

            try:
                self._store.add_to_role(account, DEFAULT_ROLE)
            except (Role.DoesNotExist, DatabaseError) as exc:
                # The account row exists without a role at this point.
                logger.error("Account %s created without role %s: %s", account.pk, DEFAULT_ROLE.label, exc)
                return Failure.storage(f"Could not assign role {DEFAULT_ROLE.label}")

            return success(status_code=status.HTTP_201_CREATED)

        except Exception:
            logger.exception("Error occurred while registering user")
            return Failure.unexpected("Error occurred while registering user")

    def login(self, data: Mapping[str, Any]) -> Result[str]:
        """Verify credentials and issue a signed token.

        A wrong password answers 400, the same status as a malformed
        payload.
        """
        try:
            outcome = run_validator(LoginValidator, data)
            if not outcome.is_valid:
                return Failure.validation(outcome.errors)

            account = self._store.find_by_email(outcome.data["email"])
            if account is None:
                return Failure.not_found("User not found")

            if not account.check_password(outcome.data["password"]):
                return failure(status.HTTP_400_BAD_REQUEST, "Invalid user credentials")

            token = self.tokens.generate_token(account, account.role_names())
            return success(token)

        except Exception:
            logger.exception("Error occurred while user login")
            return Failure.unexpected("Error occurred user login")

    def delete_account(self, account_id: Any) -> Result[None]:
        """Delete an account; its articles go with it through the FK cascade."""
        try:
            key = _parse_id(account_id)
            account = self.accounts.get_by_id(key) if key is not None else None
            if account is None:
                return Failure.not_found("User not found")

            try:
                self.accounts.delete(account)
            except StorageError:
                return failure(status.HTTP_400_BAD_REQUEST, "Could not delete user")

            return success(status_code=status.HTTP_204_NO_CONTENT)

        except Exception:
            logger.exception("Error occurred while deleting user")
            return Failure.unexpected("Error occurred while deleting user")

    def assign_role(self, account: Account, role_type: RoleType) -> Result[None]:
        try:
            self._store.add_to_role(account, role_type)
        except (Role.DoesNotExist, DatabaseError):
            logger.exception("Could not assign role %s to account %s", role_type.label, account.pk)
            return Failure.storage(f"Could not assign role {role_type.label}")
        return success()


def _parse_id(value: Any) -> int | None:
    try:
        key = int(value)
    except (TypeError, ValueError):
        return None
    return key if key > 0 else None


__all__ = ["AuthService"]
