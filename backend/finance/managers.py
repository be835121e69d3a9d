# finance/managers.py
from django.db import models


class OwnedQuerySet(models.QuerySet):
    """Queryset restricted to rows owned by one identity."""

    owner_field = "owner_id"

    def for_owner(self, owner_id):
        return self.filter(**{self.owner_field: owner_id})


class BudgetCategoryQuerySet(OwnedQuerySet):
    # Categories are owned through their budget
    owner_field = "budget__owner_id"
