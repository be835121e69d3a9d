"""
Service for budgets and their categories.
"""

import logging

from django.db import transaction as db_transaction

from ..models import Budget, BudgetCategory
from .records import get_owned_record

logger = logging.getLogger(__name__)


class BudgetService:
    """
    Budget writes. Categories sent with a budget replace its category set.
    """

    @staticmethod
    def get_owned_budget(owner_context, budget_id):
        """Resolve a budget of the owner or raise RecordNotFound."""
        return get_owned_record(Budget, owner_context, budget_id)

    @staticmethod
    def _create_categories(budget, categories):
        return [
            BudgetCategory.objects.create(budget=budget, **category)
            for category in categories
        ]

    @staticmethod
    @db_transaction.atomic
    def create_budget(owner_context, data):
        """
        Create a budget together with its categories.

        Args:
            owner_context: OwnerContext of the request
            data: Validated serializer data, optionally with ``categories``

        Returns:
            Budget: The created budget
        """
        data = dict(data)
        categories = data.pop("categories", [])

        budget = Budget.objects.create(**{**data, "owner_id": owner_context.owner_id})
        BudgetService._create_categories(budget, categories)

        logger.info(
            "Budget created",
            extra={
                "owner_id": owner_context.owner_id,
                "budget_id": str(budget.id),
                "category_count": len(categories),
                "action": "budget_created",
                "component": "BudgetService",
            },
        )
        return budget

    @staticmethod
    @db_transaction.atomic
    def update_budget(owner_context, budget, data):
        """
        Apply validated changes to a budget.

        When ``categories`` is present the existing categories are replaced
        inside the same database transaction.
        """
        data = dict(data)
        categories = data.pop("categories", None)

        for field, value in data.items():
            setattr(budget, field, value)
        budget.save()

        if categories is not None:
            deleted, _ = budget.categories.all().delete()
            BudgetService._create_categories(budget, categories)
            logger.info(
                "Budget categories replaced",
                extra={
                    "owner_id": owner_context.owner_id,
                    "budget_id": str(budget.id),
                    "deleted_count": deleted,
                    "created_count": len(categories),
                    "action": "budget_categories_replaced",
                    "component": "BudgetService",
                },
            )

        logger.info(
            "Budget updated",
            extra={
                "owner_id": owner_context.owner_id,
                "budget_id": str(budget.id),
                "updated_fields": list(data.keys()),
                "action": "budget_updated",
                "component": "BudgetService",
            },
        )
        return budget
