# finance/mixins/owner_assignment.py
"""
Serializer mixin stamping the owner of new records from the request context.
"""

import logging

logger = logging.getLogger(__name__)


class OwnerAssignmentMixin:
    """
    Assigns ``owner_id`` from the OwnerContext when a record is created.

    Owner fields sent by clients are read-only on the serializers and never
    reach validated data. Updates keep the stored owner.
    """

    def validate(self, attrs):
        """
        Add the owner id to validated data on create.

        Args:
            attrs: Serializer attributes

        Returns:
            dict: Attributes including ``owner_id`` for new records
        """
        attrs = super().validate(attrs)
        owner_context = self.context.get("owner_context")

        if owner_context is not None and self.instance is None:
            attrs["owner_id"] = owner_context.owner_id
            logger.debug(
                "Owner assigned from request context",
                extra={
                    "owner_id": owner_context.owner_id,
                    "serializer": self.__class__.__name__,
                    "action": "owner_assignment",
                    "component": "OwnerAssignmentMixin",
                },
            )

        return attrs
