"""Shared abstract models."""

from django.db import models


class AuditableModel(models.Model):
    """Model whose timestamps are stamped by ``core.audit.AuditHook``.

    Neither field is written by domain code; the hook sets ``created_at`` when
    the row is inserted and ``updated_at`` on every later update.
    """

    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        abstract = True


__all__ = ["AuditableModel"]
