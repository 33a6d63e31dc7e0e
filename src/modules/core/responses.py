"""Response envelope helpers.

Every API response uses one of three shapes:

- success: ``{"data": <payload>}``
- validation failure: ``{"errors": [{"field": ..., "message": ...}, ...]}``
- any other failure: ``{"error": "<message>"}``

Status codes are chosen by the caller and never depend on the payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from rest_framework import status
from rest_framework.response import Response

if TYPE_CHECKING:
    from modules.core.validation import Violation

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def data_response(payload: Any, status_code: int = status.HTTP_200_OK) -> Response:
    return Response({"data": payload}, status=status_code)


def errors_response(violations: Iterable[Violation]) -> Response:
    return Response(
        {"errors": [violation.to_dict() for violation in violations]},
        status=status.HTTP_400_BAD_REQUEST,
    )


def error_response(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)
