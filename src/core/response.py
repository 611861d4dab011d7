"""Response helpers translating service results into the API envelope."""

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.result import Result


def api_response(data: Any, status: int = http_status.HTTP_200_OK) -> Response:
    """Return data wrapped in the standard `{ "data": ..., "errors": [] }` envelope."""

    return Response({"data": data, "errors": []}, status=status)


def error_response(errors: list[str], status: int) -> Response:
    return Response({"data": None, "errors": errors}, status=status)


def result_response(result: Result) -> Response:
    """Translate a service result into a DRF response.

    ``204`` responses carry no body; failures never expose a payload.
    """

    if not result.is_success:
        return error_response(list(result.errors), result.status_code)
    if result.status_code == http_status.HTTP_204_NO_CONTENT:
        return Response(status=http_status.HTTP_204_NO_CONTENT)
    return api_response(result.value, status=result.status_code)


class BaseAPIView(APIView):
    """APIView base for endpoints that answer with a service result."""

    permission_classes: list[Any] = []


__all__ = ["BaseAPIView", "api_response", "error_response", "result_response"]
