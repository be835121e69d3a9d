"""
Centralized API error formatting.

Every exception raised while handling an API request ends up here (DRF
``EXCEPTION_HANDLER``). The handler logs structured context and answers with
the uniform ``{"status": "error", "message": ...}`` envelope. Unexpected
errors are logged with their stack and answered with a generic 500 so that
storage or driver details never reach the client.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"
VALIDATION_ERROR_MESSAGE = "Validation failed"


class Conflict(APIException):
    """The operation is blocked by records that depend on the target."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "The operation conflicts with dependent records."
    default_code = "conflict"


def _first_message(detail):
    """Return the first human-readable message from a DRF error detail."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def _log_context(exc, context):
    request = context.get("request")
    view = context.get("view")
    user = getattr(request, "user", None) if request is not None else None
    return {
        "request_path": getattr(request, "path", None),
        "request_method": getattr(request, "method", None),
        "owner_id": getattr(user, "id", None) if user is not None else None,
        "view": view.__class__.__name__ if view is not None else None,
        "error_type": type(exc).__name__,
        "component": "envelope_exception_handler",
    }


def envelope_exception_handler(exc, context):
    """
    Format any exception raised by a view into the error envelope.

    Args:
        exc: The raised exception
        context: DRF handler context with ``view`` and ``request``

    Returns:
        Response: Error envelope with the mapped HTTP status code
    """
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(as_serializer_error(exc))

    response = exception_handler(exc, context)
    log_context = _log_context(exc, context)

    if response is None:
        set_rollback()
        logger.error(
            "Unhandled API exception",
            extra={
                **log_context,
                "action": "api_unhandled_exception",
                "severity": "critical",
            },
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return Response(
            {"status": "error", "message": GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        body = {
            "status": "error",
            "message": VALIDATION_ERROR_MESSAGE,
            "errors": response.data,
        }
    elif response.status_code >= 500:
        body = {"status": "error", "message": GENERIC_ERROR_MESSAGE}
    else:
        body = {"status": "error", "message": _first_message(response.data)}

    log_method = logger.error if response.status_code >= 500 else logger.warning
    log_method(
        "API request rejected",
        extra={
            **log_context,
            "status_code": response.status_code,
            "error_message": body["message"],
            "action": "api_request_rejected",
        },
    )

    response.data = body
    return response
