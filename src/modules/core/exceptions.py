"""DRF exception handler producing the flat ``{"error": ...}`` envelope.

- Exceptions DRF knows how to render (malformed JSON,
  unsupported media type, method not allowed, ...) keep their status code.
- Anything else is an unhandled fault: it is logged with its traceback,
  the current transaction is rolled back and the client receives a generic
  500 without internal details.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from modules.core.responses import INTERNAL_ERROR_MESSAGE, error_response

logger = structlog.get_logger(__name__)

FORWARDED_HEADERS = ("Allow", "WWW-Authenticate", "Retry-After")


def _detail_message(detail: Any) -> str:
    if isinstance(detail, dict):
        detail = next(iter(detail.values()), "")
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)

    if response is not None:
        envelope = error_response(_detail_message(response.data), response.status_code)
        for header in FORWARDED_HEADERS:
            if response.has_header(header):
                envelope[header] = response[header]
        return envelope

    view = context.get("view")
    logger.exception(
        "unhandled_fault",
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
    )
    set_rollback()
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
