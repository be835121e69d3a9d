"""
Owner-scoped record lookups shared by the finance services.
"""

import logging

from django.core.exceptions import ValidationError

from ..exceptions import RecordNotFound

logger = logging.getLogger(__name__)


def get_owned_record(model, owner_context, record_id):
    """
    Fetch one record of ``model`` by id, scoped to the context's owner.

    A record of another owner is reported exactly like a missing one.

    Raises:
        RecordNotFound: No record with this id belongs to the owner
    """
    try:
        record = (
            model.objects.for_owner(owner_context.owner_id)
            .filter(pk=record_id)
            .first()
        )
    except (ValueError, ValidationError):
        # Malformed ids can never match a record
        record = None

    if record is None:
        logger.info(
            "Owned record lookup missed",
            extra={
                "model_name": model.__name__,
                "record_id": str(record_id),
                "owner_id": owner_context.owner_id,
                "action": "owned_record_not_found",
                "component": "get_owned_record",
            },
        )
        raise RecordNotFound(model.__name__, record_id)

    return record


def owned_ids(model, owner_context, ids):
    """Return the subset of ``ids`` that belong to the owner."""
    ids = [record_id for record_id in ids if record_id is not None]
    if not ids:
        return set()
    return set(
        model.objects.for_owner(owner_context.owner_id)
        .filter(pk__in=ids)
        .values_list("pk", flat=True)
    )
