"""
Service for transaction operations with reference checks and logging.

This module provides the TransactionService class. Every create and update
re-checks that the source account (and, for transfers, the destination
account) belongs to the requesting owner, using the stored values merged with
the submitted ones.
"""

import logging

from django.db import transaction as db_transaction

from ..exceptions import InvalidReference
from ..models import Account, Transaction
from .records import owned_ids

# Get structured logger for this module
logger = logging.getLogger(__name__)


class TransactionService:
    """
    Service for handling transaction writes and listing filters.
    """

    @staticmethod
    def validate_references(owner_context, data, instance=None):
        """
        Check account references of a transaction write.

        Stored values of ``instance`` are merged with ``data`` so partial
        updates are validated against the resulting record. For non-transfer
        transactions the destination account is cleared in ``data``.

        Args:
            owner_context: OwnerContext of the request
            data: Validated serializer data (modified in place)
            instance: Stored transaction for updates

        Raises:
            InvalidReference: With one entry per failing field
        """
        merged = {
            "type": getattr(instance, "type", None),
            "account_id": getattr(instance, "account_id", None),
            "destination_account_id": getattr(instance, "destination_account_id", None),
        }
        merged.update({key: data[key] for key in merged if key in data})

        is_transfer = merged["type"] == Transaction.TransactionType.TRANSFER
        if not is_transfer:
            merged["destination_account_id"] = None
            data["destination_account_id"] = None

        account_id = merged["account_id"]
        destination_id = merged["destination_account_id"]
        owned = owned_ids(Account, owner_context, [account_id, destination_id])

        errors = {}
        if account_id not in owned:
            errors["accountId"] = ["Account not found."]

        if is_transfer:
            if destination_id is None:
                errors["destinationAccountId"] = ["This field is required for transfers."]
            elif destination_id not in owned:
                errors["destinationAccountId"] = ["Destination account not found."]
            elif destination_id == account_id:
                errors["destinationAccountId"] = [
                    "Destination account must differ from the source account."
                ]

        if errors:
            logger.warning(
                "Transaction account references rejected",
                extra={
                    "owner_id": owner_context.owner_id,
                    "transaction_id": str(instance.id) if instance else "new",
                    "transaction_type": merged["type"],
                    "error_fields": list(errors.keys()),
                    "action": "transaction_references_rejected",
                    "component": "TransactionService",
                    "severity": "medium",
                },
            )
            raise InvalidReference(errors)

    @staticmethod
    def create_transaction(owner_context, data):
        """
        Create a transaction after verifying its account references.

        Args:
            owner_context: OwnerContext of the request
            data: Validated serializer data

        Returns:
            Transaction: The created transaction
        """
        data = dict(data)
        TransactionService.validate_references(owner_context, data)

        transaction = Transaction.objects.create(
            **{**data, "owner_id": owner_context.owner_id}
        )

        logger.info(
            "Transaction created",
            extra={
                "owner_id": owner_context.owner_id,
                "transaction_id": str(transaction.id),
                "transaction_type": transaction.type,
                "status": transaction.status,
                "action": "transaction_created",
                "component": "TransactionService",
            },
        )
        return transaction

    @staticmethod
    @db_transaction.atomic
    def update_transaction(owner_context, transaction, data):
        """
        Apply validated changes to an owned transaction.

        References are always re-validated, also when the submitted ids equal
        the stored ones.
        """
        data = dict(data)
        TransactionService.validate_references(owner_context, data, instance=transaction)

        for field, value in data.items():
            setattr(transaction, field, value)
        transaction.save()

        logger.info(
            "Transaction updated",
            extra={
                "owner_id": owner_context.owner_id,
                "transaction_id": str(transaction.id),
                "updated_fields": list(data.keys()),
                "action": "transaction_updated",
                "component": "TransactionService",
            },
        )
        return transaction

    @staticmethod
    def filter_transactions(queryset, filters):
        """
        Apply listing filters combined with AND.

        Args:
            queryset: Owner-scoped transaction queryset
            filters: Validated TransactionFilterSerializer data

        Returns:
            QuerySet: Filtered queryset, ordering untouched
        """
        lookups = {
            "start_date": "date__gte",
            "end_date": "date__lte",
            "type": "type",
            "account_id": "account_id",
            "category": "category",
            "status": "status",
        }
        applied = {
            lookup: filters[key]
            for key, lookup in lookups.items()
            if filters.get(key) not in (None, "")
        }

        logger.debug(
            "Transaction filters applied",
            extra={
                "filters_applied": {key: str(value) for key, value in applied.items()},
                "action": "transaction_filters_applied",
                "component": "TransactionService",
            },
        )
        return queryset.filter(**applied)
