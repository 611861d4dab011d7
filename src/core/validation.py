"""Run DRF serializers as side-effect-free rule sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from rest_framework import serializers


@dataclass(frozen=True)
class ValidationOutcome:
    data: dict[str, Any] = field(default_factory=dict)
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _flatten(detail: Any) -> list[str]:
    if isinstance(detail, Mapping):
        messages: list[str] = []
        for value in detail.values():
            messages.extend(_flatten(value))
        return messages
    if isinstance(detail, (list, tuple)):
        messages = []
        for value in detail:
            messages.extend(_flatten(value))
        return messages
    return [str(detail)]


def run_validator(validator_class: type[serializers.Serializer], data: Any) -> ValidationOutcome:
    """Validate ``data`` and collect every message instead of raising.

    Fields are checked independently, so one request reports all of its
    invalid fields together, in declaration order.
    """
    validator = validator_class(data=data)
    if validator.is_valid():
        return ValidationOutcome(data=dict(validator.validated_data))
    return ValidationOutcome(errors=tuple(_flatten(validator.errors)))


__all__ = ["ValidationOutcome", "run_validator"]
