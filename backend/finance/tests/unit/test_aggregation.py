# finance/tests/unit/test_aggregation.py
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from finance.utils.aggregation import (
    account_net_flows,
    budget_totals,
    budget_utilization,
    category_breakdown,
    compute_totals,
    display_utilization,
    goal_progress,
    monthly_totals,
    overall_utilization,
    percentage,
    within_period,
)


def tx(amount, tx_type, day=date(2025, 5, 10), category="", status="COMPLETED", **kwargs):
    return SimpleNamespace(
        amount=Decimal(amount),
        type=tx_type,
        date=day,
        category=category,
        status=status,
        account_id=kwargs.get("account_id", "checking"),
        destination_account_id=kwargs.get("destination_account_id"),
    )


class TestComputeTotals:
    """Totals over completed income and expenses"""

    def test_only_completed_income_and_expenses_count(self):
        transactions = [
            tx("5000.00", "INCOME"),
            tx("1500.00", "EXPENSE"),
            tx("600.00", "EXPENSE", status="PENDING"),
            tx("80.00", "EXPENSE", status="CANCELED"),
            tx("1000.00", "TRANSFER", destination_account_id="savings"),
        ]

        totals = compute_totals(transactions)

        assert totals == {
            "totalIncome": Decimal("5000.00"),
            "totalExpenses": Decimal("1500.00"),
            "balance": Decimal("3500.00"),
        }

    def test_empty_input_gives_zero_totals(self):
        totals = compute_totals([])

        assert totals["totalIncome"] == Decimal("0")
        assert totals["balance"] == Decimal("0")

    def test_decimal_sums_are_exact(self):
        transactions = [tx("0.10", "INCOME"), tx("0.20", "INCOME")]

        assert compute_totals(transactions)["totalIncome"] == Decimal("0.30")


class TestCategoryBreakdown:
    def test_groups_by_category_sorted_by_name(self):
        transactions = [
            tx("150.00", "EXPENSE", category="Transporte"),
            tx("600.00", "EXPENSE", category="Alimentação"),
            tx("150.00", "EXPENSE", category="Alimentação"),
            tx("5000.00", "INCOME", category="Salário"),
        ]

        breakdown = category_breakdown(transactions, "EXPENSE")

        assert list(breakdown) == ["Alimentação", "Transporte"]
        assert breakdown["Alimentação"] == Decimal("750.00")

    def test_missing_category_is_uncategorized(self):
        breakdown = category_breakdown([tx("20.00", "EXPENSE", category="")], "EXPENSE")

        assert breakdown == {"Uncategorized": Decimal("20.00")}

    def test_pending_transactions_are_ignored(self):
        breakdown = category_breakdown(
            [tx("20.00", "EXPENSE", category="Lazer", status="PENDING")], "EXPENSE"
        )

        assert breakdown == {}


class TestMonthlyTotals:
    def test_months_are_ordered_oldest_first(self):
        transactions = [
            tx("5000.00", "INCOME", day=date(2025, 5, 1)),
            tx("300.00", "EXPENSE", day=date(2025, 4, 28)),
            tx("2250.00", "EXPENSE", day=date(2025, 5, 20)),
        ]

        months = monthly_totals(transactions)

        assert [m["month"] for m in months] == ["2025-04", "2025-05"]
        assert months[0]["net"] == Decimal("-300.00")
        assert months[1] == {
            "month": "2025-05",
            "income": Decimal("5000.00"),
            "expenses": Decimal("2250.00"),
            "net": Decimal("2750.00"),
        }


class TestWithinPeriod:
    def test_bounds_are_inclusive(self):
        first = tx("1.00", "INCOME", day=date(2025, 5, 1))
        last = tx("1.00", "INCOME", day=date(2025, 5, 31))
        outside = tx("1.00", "INCOME", day=date(2025, 6, 1))

        assert within_period([first, last, outside], date(2025, 5, 1), date(2025, 5, 31)) == [
            first,
            last,
        ]

    def test_open_bounds_keep_everything(self):
        transactions = [tx("1.00", "INCOME", day=date(2020, 1, 1))]

        assert within_period(transactions) == transactions


class TestAccountNetFlows:
    def test_transfer_moves_money_between_accounts(self):
        transactions = [
            tx("5000.00", "INCOME", account_id="checking"),
            tx("1000.00", "TRANSFER", account_id="checking", destination_account_id="savings"),
            tx("150.00", "EXPENSE", account_id="card"),
        ]

        flows = account_net_flows(transactions)

        assert flows == {
            "checking": Decimal("4000.00"),
            "savings": Decimal("1000.00"),
            "card": Decimal("-150.00"),
        }

    def test_transactions_after_end_date_are_excluded(self):
        transactions = [
            tx("100.00", "INCOME", day=date(2025, 5, 31)),
            tx("900.00", "INCOME", day=date(2025, 6, 1)),
        ]

        flows = account_net_flows(transactions, end_date=date(2025, 5, 31))

        assert flows == {"checking": Decimal("100.00")}


class TestPercentages:
    def test_percentage_rounds_to_cents(self):
        assert percentage(Decimal("1200"), Decimal("1400")) == Decimal("85.71")

    def test_zero_whole_gives_zero(self):
        assert percentage(Decimal("50"), Decimal("0")) == Decimal("0")

    def test_budget_utilization_is_unclamped(self):
        utilization = budget_utilization(Decimal("1000.00"), Decimal("1200.00"))

        assert utilization == Decimal("120.00")
        assert display_utilization(utilization) == Decimal("100")

    def test_display_utilization_keeps_values_below_hundred(self):
        assert display_utilization(Decimal("42.50")) == Decimal("42.50")

    def test_budget_totals_and_overall_utilization(self):
        categories = [
            SimpleNamespace(planned=Decimal("1000.00"), actual=Decimal("1200.00")),
            SimpleNamespace(planned=Decimal("400.00"), actual=Decimal("0.00")),
        ]

        assert budget_totals(categories) == (Decimal("1400.00"), Decimal("1200.00"))
        assert overall_utilization(categories) == Decimal("85.71")

    def test_overall_utilization_of_empty_budget_is_zero(self):
        assert overall_utilization([]) == Decimal("0")

    def test_goal_progress_can_exceed_hundred(self):
        assert goal_progress(Decimal("12000"), Decimal("10000")) == Decimal("120.00")
