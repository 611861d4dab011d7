"""Pre-commit hook that stamps audit timestamps on tracked entities."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence

from django.utils import timezone

from core.models import AuditableModel
from core.unit_of_work import EntityState, TrackedEntry


class AuditHook:
    """Stamp ``created_at`` on inserts and ``updated_at`` on updates.

    The clock is read once per batch so every entity in a commit carries the
    same instant. Values supplied by callers are always overwritten. The
    previous values are kept until the batch finishes so ``on_rollback`` can
    put them back when the write fails.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._clock = clock
        self._previous: dict[int, tuple[AuditableModel, datetime | None, datetime | None]] = {}

    def now(self) -> datetime:
        return (self._clock or timezone.now)()

    def before_commit(self, entries: Sequence[TrackedEntry]) -> None:
        self._previous.clear()
        stamp = self.now()
        for entry in entries:
            entity = entry.entity
            if not isinstance(entity, AuditableModel):
                continue
            if entry.state is EntityState.ADDED:
                self._remember(entity)
                entity.created_at = stamp
            elif entry.state is EntityState.MODIFIED:
                self._remember(entity)
                entity.updated_at = stamp

    def on_rollback(self, entries: Sequence[TrackedEntry]) -> None:
        for entity, created_at, updated_at in self._previous.values():
            entity.created_at = created_at
            entity.updated_at = updated_at
        self._previous.clear()

    def _remember(self, entity: AuditableModel) -> None:
        self._previous[id(entity)] = (entity, entity.created_at, entity.updated_at)


__all__ = ["AuditHook"]
