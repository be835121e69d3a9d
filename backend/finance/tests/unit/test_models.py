# finance/tests/unit/test_models.py
from datetime import date, timedelta
from decimal import Decimal

import pytest
from django.db.models import ProtectedError

from finance.models import Account, Budget, BudgetCategory, FinancialReport, Transaction

from ..factories import (
    AccountFactory,
    BudgetCategoryFactory,
    BudgetFactory,
    FinancialGoalFactory,
    FinancialReportFactory,
    TransactionFactory,
)

pytestmark = pytest.mark.django_db


class TestOwnedQuerySet:
    def test_for_owner_returns_only_owned_rows(self, owner_id, other_owner_id):
        mine = AccountFactory(owner_id=owner_id)
        AccountFactory(owner_id=other_owner_id)

        assert list(Account.objects.for_owner(owner_id)) == [mine]

    def test_budget_categories_are_owned_through_their_budget(self, owner_id, other_owner_id):
        mine = BudgetCategoryFactory(budget=BudgetFactory(owner_id=owner_id))
        BudgetCategoryFactory(budget=BudgetFactory(owner_id=other_owner_id))

        assert list(BudgetCategory.objects.for_owner(owner_id)) == [mine]


class TestAccountModel:
    def test_parent_with_children_cannot_be_deleted(self, accounts):
        with pytest.raises(ProtectedError):
            accounts["Ativos"].delete()

    def test_str(self, accounts):
        assert str(accounts["Ativos"]) == "Ativos (ASSET)"


class TestTransactionModel:
    def test_defaults(self, accounts):
        transaction = Transaction.objects.create(
            owner_id=accounts["Ativos"].owner_id,
            date=date(2025, 5, 1),
            amount=Decimal("10.00"),
            type=Transaction.TransactionType.EXPENSE,
            account=accounts["Conta Corrente"],
        )

        assert transaction.status == Transaction.Status.PENDING
        assert transaction.tags == []

    def test_listing_is_newest_first(self, owner_id, accounts):
        older = TransactionFactory(owner_id=owner_id, account=accounts["Poupança"], date=date(2025, 5, 1))
        newer = TransactionFactory(owner_id=owner_id, account=accounts["Poupança"], date=date(2025, 5, 9))

        assert list(Transaction.objects.for_owner(owner_id)) == [newer, older]


class TestBudgetModel:
    def test_totals_and_utilization(self, budget):
        assert budget.total_planned == Decimal("1400.00")
        assert budget.total_actual == Decimal("1200.00")
        assert budget.utilization == Decimal("85.71")

    def test_category_utilization_is_unclamped_and_display_is_clamped(self, budget):
        food = budget.categories.get(name="Alimentação")

        assert food.utilization == Decimal("120.00")
        assert food.display_utilization == Decimal("100")

    def test_budget_without_categories(self, owner_id):
        budget = BudgetFactory(owner_id=owner_id)

        assert budget.total_planned == Decimal("0")
        assert budget.utilization == Decimal("0")

    def test_deleting_budget_deletes_its_categories(self, budget):
        budget.delete()

        assert not BudgetCategory.objects.exists()
        assert not Budget.objects.exists()


class TestFinancialGoalModel:
    def test_progress_percentage(self, owner_id):
        goal = FinancialGoalFactory(
            owner_id=owner_id, target_amount=Decimal("20000"), current_amount=Decimal("10000")
        )

        assert goal.progress == Decimal("50.00")

    def test_progress_of_zero_target_is_zero(self, owner_id):
        goal = FinancialGoalFactory.build(owner_id=owner_id, target_amount=Decimal("0"))

        assert goal.progress == Decimal("0")


class TestFinancialReportModel:
    def test_reports_are_newest_first(self, owner_id):
        first = FinancialReportFactory(owner_id=owner_id)
        second = FinancialReportFactory(owner_id=owner_id)
        FinancialReport.objects.filter(pk=first.pk).update(
            created_at=second.created_at - timedelta(minutes=1)
        )

        assert list(FinancialReport.objects.for_owner(owner_id)) == [second, first]
