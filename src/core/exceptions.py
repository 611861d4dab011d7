"""Storage error type and the DRF exception handler enforcing the envelope."""

import logging
from typing import Any

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

STORAGE_UNAVAILABLE_MESSAGE = "Storage is temporarily unavailable."


class StorageError(Exception):
    """Raised by the repository when the database rejects an operation.

    The originating database exception is always chained as ``__cause__``.
    """


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a flat list of messages."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if "detail" in payload:
            # Common DRF pattern: {"detail": "..."}
            return [payload["detail"]]
        errors: list[Any] = []
        for messages in payload.values():
            errors.extend(messages if isinstance(messages, list) else [messages])
        return errors
    return [payload]


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap errors that escape a view in the `{ "data": null, "errors": [...] }` shape.

    Services already convert their faults into results, so this only sees
    parser errors, authentication failures and storage faults raised outside
    a service.
    """

    if isinstance(exc, (StorageError, DatabaseError)):
        logger.exception("Storage failure while handling %s", context.get("view").__class__.__name__)
        return Response(
            {"data": None, "errors": [STORAGE_UNAVAILABLE_MESSAGE]},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = drf_exception_handler(exc, context)

    if response is None:
        return response

    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code >= 400:
        response.data = {"data": None, "errors": _normalize_errors(response.data)}

    return response


__all__ = ["StorageError", "custom_exception_handler"]
