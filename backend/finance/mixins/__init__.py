# finance/mixins/__init__.py
from .owner_assignment import OwnerAssignmentMixin
from .owner_context import OwnerContext, OwnerContextMixin
from .service_exception_handler import ServiceExceptionHandlerMixin

__all__ = [
    "OwnerContext",
    "OwnerContextMixin",
    "OwnerAssignmentMixin",
    "ServiceExceptionHandlerMixin",
]
