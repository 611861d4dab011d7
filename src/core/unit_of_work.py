"""Unit of work: one transactional batch of writes with pre-commit hooks.

Entities are registered with the state they should reach (added, modified,
deleted) and written together by ``commit``. Every hook sees the whole batch
inside the transaction before any row is written, and is told to roll back
its own side effects if the batch fails.

A unit of work holds mutable tracking state and must not be shared between
concurrent requests; build one per logical operation.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from django.db import DEFAULT_DB_ALIAS, models, transaction

logger = logging.getLogger(__name__)


class EntityState(enum.Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass
class TrackedEntry:
    entity: models.Model
    state: EntityState


class CommitHook(Protocol):
    """Callback invoked around a unit-of-work commit."""

    def before_commit(self, entries: Sequence[TrackedEntry]) -> None:
        ...

    def on_rollback(self, entries: Sequence[TrackedEntry]) -> None:
        ...


class UnitOfWork:
    """Track entity changes and write them atomically on ``commit``."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS, hooks: Iterable[CommitHook] | None = None):
        if hooks is None:
            # Imported here to avoid a circular import with core.audit.
            from core.audit import AuditHook

            hooks = [AuditHook()]
        self.using = using
        self._hooks = list(hooks)
        self._entries: list[TrackedEntry] = []

    @property
    def entries(self) -> tuple[TrackedEntry, ...]:
        return tuple(self._entries)

    def add(self, entity: models.Model) -> None:
        self._track(entity, EntityState.ADDED)

    def update(self, entity: models.Model) -> None:
        self._track(entity, EntityState.MODIFIED)

    def delete(self, entity: models.Model) -> None:
        self._track(entity, EntityState.DELETED)

    def attach(self, entity: models.Model) -> None:
        """Track an entity without scheduling a write."""
        self._track(entity, EntityState.UNCHANGED)

    def _track(self, entity: models.Model, state: EntityState) -> None:
        for entry in self._entries:
            if entry.entity is entity:
                # A row added in this batch is still an insert after edits.
                if not (entry.state is EntityState.ADDED and state is EntityState.MODIFIED):
                    entry.state = state
                return
        self._entries.append(TrackedEntry(entity=entity, state=state))

    def commit(self) -> int:
        """Run hooks and write every pending entry in one transaction.

        Returns the number of entries written. On any exception the hooks
        are rolled back, the pending entries are discarded and the exception
        propagates to the caller.
        """
        entries = list(self._entries)
        pending = [e for e in entries if e.state is not EntityState.UNCHANGED]
        if not pending:
            self._entries.clear()
            return 0

        try:
            with transaction.atomic(using=self.using):
                for hook in self._hooks:
                    hook.before_commit(entries)
                for entry in pending:
                    self._write(entry)
        except Exception:
            logger.debug("Commit of %d entries rolled back", len(pending))
            for hook in reversed(self._hooks):
                hook.on_rollback(entries)
            self._entries.clear()
            raise

        self._entries.clear()
        return len(pending)

    def rollback(self) -> None:
        """Forget every pending change without touching the database."""
        self._entries.clear()

    def _write(self, entry: TrackedEntry) -> None:
        entity = entry.entity
        if entry.state is EntityState.ADDED:
            entity.save(using=self.using, force_insert=True)
        elif entry.state is EntityState.MODIFIED:
            entity.save(using=self.using, force_update=True)
        elif entry.state is EntityState.DELETED:
            entity.delete(using=self.using)


__all__ = ["CommitHook", "EntityState", "TrackedEntry", "UnitOfWork"]
