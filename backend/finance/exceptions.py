"""
Domain exceptions raised by the finance services.

Views translate them into HTTP errors through ServiceExceptionHandlerMixin.
"""


class FinanceServiceError(Exception):
    """Base class for errors raised by finance services."""


class RecordNotFound(FinanceServiceError):
    """The record does not exist or belongs to another owner."""

    def __init__(self, model_name, record_id=None):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} not found")


class InvalidReference(FinanceServiceError):
    """
    One or more submitted ids do not resolve to records of the owner.

    ``errors`` maps field names to lists of messages so every failing
    reference is reported at once.
    """

    def __init__(self, errors):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {', '.join(msgs)}" for field, msgs in errors.items()))


class DependentRecordsExist(FinanceServiceError):
    """The record cannot be deleted while other records depend on it."""
