"""Generic data-access contract shared by every entity kind.

``Repository[Article, int]`` and ``Repository[Account, int]`` are the same
class bound to different models; nothing here inspects the entity type.
Writes go through a ``UnitOfWork`` so the audit hook runs inside the same
transaction as the row it stamps.

Error policy:

- ``add`` and ``update`` log the fault and return ``False``;
- ``fetch_all``, ``get_by_id`` and ``delete`` log the fault and raise
  ``StorageError`` chained to the original exception.
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar

from django.db import DatabaseError, models
from django.db.models import QuerySet

from core.exceptions import StorageError
from core.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=models.Model)
K = TypeVar("K")


class Repository(Generic[T, K]):
    """CRUD over one model, committing through a unit of work."""

    def __init__(self, model: type[T], unit_of_work: UnitOfWork | None = None):
        self.model = model
        self.unit_of_work = unit_of_work if unit_of_work is not None else UnitOfWork()

    @property
    def _name(self) -> str:
        return self.model.__name__

    def get_all(self) -> QuerySet[T]:
        """Return a lazy queryset; faults surface when it is evaluated."""
        return self.model._default_manager.db_manager(self.unit_of_work.using).all()

    def fetch_all(self) -> list[T]:
        """Return every entity, materialized and ordered by primary key."""
        try:
            return list(self.get_all().order_by("pk"))
        except DatabaseError as exc:
            logger.exception("An error occurred while fetching all entities of type %s.", self._name)
            raise StorageError(f"Could not fetch {self._name} entities") from exc

    def get_by_id(self, key: K) -> Optional[T]:
        try:
            return self.get_all().filter(pk=key).first()
        except DatabaseError as exc:
            logger.exception(
                "An error occurred while fetching an entity of type %s with ID %s.", self._name, key
            )
            raise StorageError(f"Could not fetch {self._name} {key}") from exc

    def add(self, entity: T) -> bool:
        """Insert ``entity``; on success its primary key is populated."""
        try:
            self.unit_of_work.add(entity)
            self.unit_of_work.commit()
        except Exception:
            logger.exception("An error occurred while adding an entity of type %s.", self._name)
            return False
        return True

    def update(self, entity: T) -> bool:
        try:
            self.unit_of_work.update(entity)
            self.unit_of_work.commit()
        except Exception:
            logger.exception("An error occurred while updating an entity of type %s.", self._name)
            return False
        return True

    def delete(self, entity: T) -> bool:
        try:
            self.unit_of_work.delete(entity)
            self.unit_of_work.commit()
        except Exception as exc:
            logger.exception("An error occurred while deleting an entity of type %s.", self._name)
            raise StorageError(f"Could not delete {self._name}") from exc
        return True


__all__ = ["Repository"]
