"""Output shapes for account endpoints."""

from rest_framework import serializers

from .models import Account


class AccountSerializer(serializers.ModelSerializer):
    """Read-only account listing entry."""

    class Meta:
        model = Account
        fields = ["id", "username", "email"]
        read_only_fields = fields


__all__ = ["AccountSerializer"]
