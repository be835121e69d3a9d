"""
Service for chart-of-accounts operations.

Enforces the hierarchy rules: a parent must be an account of the same owner,
no account may be nested under itself or one of its descendants, and an
account cannot be deleted while subaccounts or transactions depend on it.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction as db_transaction
from django.db.models import Q

from ..exceptions import DependentRecordsExist, InvalidReference
from ..models import Account, Transaction
from ..utils.account_tree import creates_cycle, flatten_account_tree

logger = logging.getLogger(__name__)


class AccountService:
    """
    Service for creating, updating, deleting and flattening accounts.
    """

    @staticmethod
    def _validate_parent(owner_context, parent_id, account_id=None):
        """
        Check that ``parent_id`` is an owned account and forms no cycle.

        Raises:
            InvalidReference: Parent does not resolve to an owned account
            ValidationError: Parent is the account itself or a descendant
        """
        if parent_id is None:
            return

        if account_id is not None and parent_id == account_id:
            raise ValidationError({"parentId": ["An account cannot be its own parent."]})

        parent_of = dict(
            Account.objects.for_owner(owner_context.owner_id).values_list("id", "parent_id")
        )
        if parent_id not in parent_of:
            raise InvalidReference({"parentId": ["Parent account not found."]})

        if creates_cycle(account_id, parent_id, parent_of):
            logger.warning(
                "Account parent assignment would create a cycle",
                extra={
                    "owner_id": owner_context.owner_id,
                    "account_id": str(account_id),
                    "parent_id": str(parent_id),
                    "action": "account_cycle_rejected",
                    "component": "AccountService",
                    "severity": "medium",
                },
            )
            raise ValidationError(
                {"parentId": ["An account cannot be nested under one of its descendants."]}
            )

    @staticmethod
    def create_account(owner_context, data):
        """
        Create an account for the owner after validating its parent.

        Args:
            owner_context: OwnerContext of the request
            data: Validated serializer data

        Returns:
            Account: The created account
        """
        AccountService._validate_parent(owner_context, data.get("parent_id"))

        account = Account.objects.create(**{**data, "owner_id": owner_context.owner_id})

        logger.info(
            "Account created",
            extra={
                "owner_id": owner_context.owner_id,
                "account_id": str(account.id),
                "account_type": account.type,
                "has_parent": account.parent_id is not None,
                "action": "account_created",
                "component": "AccountService",
            },
        )
        return account

    @staticmethod
    @db_transaction.atomic
    def update_account(owner_context, account, data):
        """Apply validated changes to an owned account."""
        if "parent_id" in data:
            AccountService._validate_parent(owner_context, data["parent_id"], account.id)

        for field, value in data.items():
            setattr(account, field, value)
        account.save()

        logger.info(
            "Account updated",
            extra={
                "owner_id": owner_context.owner_id,
                "account_id": str(account.id),
                "updated_fields": list(data.keys()),
                "action": "account_updated",
                "component": "AccountService",
            },
        )
        return account

    @staticmethod
    @db_transaction.atomic
    def delete_account(owner_context, account):
        """
        Delete an account without dependents.

        Raises:
            DependentRecordsExist: The account has subaccounts or is referenced
                by transactions
        """
        owned_accounts = Account.objects.for_owner(owner_context.owner_id)
        if owned_accounts.filter(parent_id=account.id).exists():
            logger.warning(
                "Account deletion blocked by subaccounts",
                extra={
                    "owner_id": owner_context.owner_id,
                    "account_id": str(account.id),
                    "action": "account_delete_blocked",
                    "component": "AccountService",
                },
            )
            raise DependentRecordsExist(
                "Account has subaccounts. Delete or move them first."
            )

        referencing = Transaction.objects.for_owner(owner_context.owner_id).filter(
            Q(account_id=account.id) | Q(destination_account_id=account.id)
        )
        if referencing.exists():
            logger.warning(
                "Account deletion blocked by transactions",
                extra={
                    "owner_id": owner_context.owner_id,
                    "account_id": str(account.id),
                    "action": "account_delete_blocked",
                    "component": "AccountService",
                },
            )
            raise DependentRecordsExist("Account is referenced by transactions.")

        account_id = account.id
        account.delete()

        logger.info(
            "Account deleted",
            extra={
                "owner_id": owner_context.owner_id,
                "account_id": str(account_id),
                "action": "account_deleted",
                "component": "AccountService",
            },
        )

    @staticmethod
    def get_account_tree(owner_context):
        """Return the owner's accounts flattened depth-first with display paths."""
        return flatten_account_tree(Account.objects.for_owner(owner_context.owner_id))
