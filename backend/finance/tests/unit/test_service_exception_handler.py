# finance/tests/unit/test_service_exception_handler.py
from unittest.mock import patch

import pytest
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import APIException, NotFound, PermissionDenied
from rest_framework.exceptions import ValidationError as DRFValidationError

from core.exceptions import Conflict
from finance.exceptions import DependentRecordsExist, InvalidReference, RecordNotFound
from finance.mixins.owner_context import OwnerContext
from finance.mixins.service_exception_handler import ServiceExceptionHandlerMixin


class DummyView(ServiceExceptionHandlerMixin):
    owner_context = OwnerContext(owner_id="owner-1")


def raising(exc):
    def service_call(*args, **kwargs):
        raise exc

    return service_call


class TestHandleServiceCall:
    """Translation of service exceptions into DRF exceptions"""

    def setup_method(self):
        self.view = DummyView()

    def test_result_is_returned(self):
        assert self.view.handle_service_call(lambda a, b=0: a + b, 2, b=3) == 5

    def test_invalid_reference_becomes_validation_error(self):
        errors = {"accountId": ["Account not found."]}

        with pytest.raises(DRFValidationError) as exc_info:
            self.view.handle_service_call(raising(InvalidReference(errors)))

        assert exc_info.value.detail == errors

    def test_django_validation_error_keeps_field_messages(self):
        exc = DjangoValidationError({"parentId": ["An account cannot be its own parent."]})

        with pytest.raises(DRFValidationError) as exc_info:
            self.view.handle_service_call(raising(exc))

        assert exc_info.value.detail == {"parentId": ["An account cannot be its own parent."]}

    def test_django_validation_error_without_fields(self):
        with pytest.raises(DRFValidationError) as exc_info:
            self.view.handle_service_call(raising(DjangoValidationError("Broken")))

        assert exc_info.value.detail == ["Broken"]

    def test_record_not_found_becomes_404(self):
        with pytest.raises(NotFound) as exc_info:
            self.view.handle_service_call(raising(RecordNotFound("Budget", "abc")))

        assert str(exc_info.value.detail) == "Budget not found"

    def test_dependent_records_become_conflict(self):
        with pytest.raises(Conflict) as exc_info:
            self.view.handle_service_call(
                raising(DependentRecordsExist("Account has subaccounts."))
            )

        assert exc_info.value.status_code == 409
        assert str(exc_info.value.detail) == "Account has subaccounts."

    @pytest.mark.parametrize(
        "exc", [DRFValidationError({"name": ["Required."]}), PermissionDenied("Nope")]
    )
    def test_drf_exceptions_pass_through(self, exc):
        with pytest.raises(type(exc)) as exc_info:
            self.view.handle_service_call(raising(exc))

        assert exc_info.value is exc

    @patch("finance.mixins.service_exception_handler.logger")
    def test_unexpected_error_is_hidden_and_logged(self, mock_logger):
        with pytest.raises(APIException) as exc_info:
            self.view.handle_service_call(raising(RuntimeError("connection reset by db")))

        assert exc_info.value.status_code == 500
        assert "connection reset" not in str(exc_info.value.detail)
        extra = mock_logger.error.call_args.kwargs["extra"]
        assert extra["action"] == "service_unexpected_error"
        assert extra["owner_id"] == "owner-1"
        assert extra["error_type"] == "RuntimeError"
