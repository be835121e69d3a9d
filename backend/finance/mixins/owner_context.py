# finance/mixins/owner_context.py
"""
Explicit per-request owner context.

The identity resolved from the bearer token is captured once per request in an
immutable ``OwnerContext`` and handed to serializers and services. The inbound
request (headers included) is never modified.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OwnerContext:
    """Identity every read and write of the current request is scoped to."""

    owner_id: str
    email: str = ""
    name: str = ""

    @classmethod
    def from_identity(cls, identity):
        return cls(
            owner_id=str(identity.id),
            email=getattr(identity, "email", "") or "",
            name=getattr(identity, "name", "") or "",
        )


class OwnerContextMixin:
    """
    Builds the OwnerContext for authenticated requests.

    The context is created after DRF authentication and permission checks
    have run, so ``request.user`` is always a resolved identity here.
    """

    owner_context = None

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)

        self.owner_context = OwnerContext.from_identity(request.user)

        logger.debug(
            "Owner context initialized",
            extra={
                "owner_id": self.owner_context.owner_id,
                "view": self.__class__.__name__,
                "action": "owner_context_initialized",
                "component": "OwnerContextMixin",
            },
        )

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["owner_context"] = self.owner_context
        return context
