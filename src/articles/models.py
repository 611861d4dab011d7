"""Article model owned by an account."""

from django.conf import settings
from django.db import models

from core.models import AuditableModel


class Article(AuditableModel):
    """Blog article; timestamps come from the audit hook."""

    title = models.CharField(max_length=100)
    sub_heading = models.CharField(max_length=500)
    content = models.TextField()
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="articles",
        db_column="user_id",
    )

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title


__all__ = ["Article"]
