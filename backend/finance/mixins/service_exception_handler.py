"""
Service exception handler mixin.
Translates finance service exceptions into DRF exceptions with structured
logging, so views stay thin and HTTP status codes stay consistent.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import APIException, NotFound
from rest_framework.exceptions import ValidationError as DRFValidationError

from core.exceptions import Conflict

from ..exceptions import DependentRecordsExist, InvalidReference, RecordNotFound

logger = logging.getLogger(__name__)


class ServiceExceptionHandlerMixin:
    """
    Mixin for handling service layer exceptions in views.

    Mapping:
    - RecordNotFound -> 404 NotFound
    - InvalidReference, Django ValidationError -> 400 ValidationError
    - DependentRecordsExist -> 409 Conflict
    - DRF exceptions -> re-raised unchanged
    - anything else -> generic 500 without internal detail

    Usage:
        account = self.handle_service_call(
            AccountService.create_account, self.owner_context, data
        )
    """

    def handle_service_call(self, service_call, *args, **kwargs):
        """
        Execute service call with exception translation and logging.

        Args:
            service_call: Service method to execute
            *args: Positional arguments for service call
            **kwargs: Keyword arguments for service call

        Returns:
            Any: Result from service call

        Raises:
            DRFValidationError: For field and reference violations
            NotFound: For missing or foreign records
            Conflict: For deletes blocked by dependent records
            APIException: For unexpected service errors
        """
        service_name = getattr(service_call, "__qualname__", str(service_call)).split(".")[0]
        method_name = getattr(service_call, "__name__", str(service_call))
        owner_context = getattr(self, "owner_context", None)
        owner_id = owner_context.owner_id if owner_context else None

        log_context = {
            "service_name": service_name,
            "method_name": method_name,
            "owner_id": owner_id,
            "component": "ServiceExceptionHandlerMixin",
        }

        logger.debug(
            "Service call execution initiated",
            extra={**log_context, "action": "service_call_start"},
        )

        try:
            result = service_call(*args, **kwargs)

        except DRFValidationError as e:
            logger.warning(
                "Service validation error (DRF)",
                extra={
                    **log_context,
                    "error_detail": e.detail,
                    "action": "service_validation_error_drf",
                    "severity": "medium",
                },
            )
            raise

        except InvalidReference as e:
            logger.warning(
                "Service reference check failed",
                extra={
                    **log_context,
                    "error_fields": list(e.errors.keys()),
                    "action": "service_invalid_reference",
                    "severity": "medium",
                },
            )
            raise DRFValidationError(e.errors)

        except DjangoValidationError as e:
            detail = e.message_dict if hasattr(e, "error_dict") else e.messages

            logger.warning(
                "Service validation error (Django)",
                extra={
                    **log_context,
                    "error_messages": e.messages,
                    "action": "service_validation_error_django",
                    "severity": "medium",
                },
            )
            raise DRFValidationError(detail)

        except RecordNotFound as e:
            logger.info(
                "Service record not found",
                extra={
                    **log_context,
                    "model_name": e.model_name,
                    "record_id": str(e.record_id) if e.record_id else None,
                    "action": "service_record_not_found",
                },
            )
            raise NotFound(str(e))

        except DependentRecordsExist as e:
            logger.warning(
                "Service operation blocked by dependent records",
                extra={
                    **log_context,
                    "error_message": str(e),
                    "action": "service_dependent_records",
                    "severity": "medium",
                },
            )
            raise Conflict(str(e))

        except APIException as e:
            logger.error(
                "Service API exception",
                extra={
                    **log_context,
                    "error_detail": e.detail,
                    "status_code": e.status_code,
                    "action": "service_api_exception",
                    "severity": "high",
                },
            )
            raise

        except Exception as e:
            logger.error(
                "Service operation failed unexpectedly",
                extra={
                    **log_context,
                    "error_type": type(e).__name__,
                    "args_count": len(args),
                    "kwargs_keys": list(kwargs.keys()),
                    "action": "service_unexpected_error",
                    "severity": "critical",
                },
                exc_info=True,
            )
            # Storage and driver messages are not exposed to clients
            raise APIException(detail="Service operation failed", code="service_error")

        logger.debug(
            "Service call completed successfully",
            extra={
                **log_context,
                "result_type": type(result).__name__,
                "action": "service_call_success",
            },
        )
        return result
