"""
Aggregation rules over already-fetched records.

These functions never touch the database. They accept any objects exposing
the model attribute names (``type``, ``status``, ``amount``, ``category``,
``date``, ``account_id``, ``destination_account_id`` for transactions;
``planned`` and ``actual`` for budget categories) and use exact Decimal
arithmetic throughout.
"""

from collections import defaultdict
from decimal import Decimal

ZERO = Decimal("0.00")
HUNDRED = Decimal("100")
PERCENT_PLACES = Decimal("0.01")

INCOME = "INCOME"
EXPENSE = "EXPENSE"
TRANSFER = "TRANSFER"
COMPLETED = "COMPLETED"


def completed(transactions):
    """Keep only transactions that actually moved money."""
    return [t for t in transactions if t.status == COMPLETED]


def within_period(transactions, start_date=None, end_date=None):
    """Keep transactions dated inside the inclusive [start_date, end_date] range."""
    return [
        t
        for t in transactions
        if (start_date is None or t.date >= start_date)
        and (end_date is None or t.date <= end_date)
    ]


def compute_totals(transactions):
    """
    Sum completed income and expenses.

    Returns:
        dict: ``totalIncome``, ``totalExpenses`` and
        ``balance = totalIncome - totalExpenses``
    """
    total_income = ZERO
    total_expenses = ZERO
    for t in completed(transactions):
        if t.type == INCOME:
            total_income += t.amount
        elif t.type == EXPENSE:
            total_expenses += t.amount

    return {
        "totalIncome": total_income,
        "totalExpenses": total_expenses,
        "balance": total_income - total_expenses,
    }


def category_breakdown(transactions, transaction_type):
    """
    Group completed transactions of one type by category and sum them.

    Returns:
        dict: category name -> total, ordered by category name
    """
    totals = defaultdict(lambda: ZERO)
    for t in completed(transactions):
        if t.type == transaction_type:
            totals[t.category or "Uncategorized"] += t.amount
    return dict(sorted(totals.items()))


def monthly_totals(transactions):
    """
    Completed income and expenses per calendar month, oldest month first.

    Returns:
        list[dict]: ``month`` ("YYYY-MM"), ``income``, ``expenses``, ``net``
    """
    months = defaultdict(lambda: {"income": ZERO, "expenses": ZERO})
    for t in completed(transactions):
        if t.type == INCOME:
            months[t.date.strftime("%Y-%m")]["income"] += t.amount
        elif t.type == EXPENSE:
            months[t.date.strftime("%Y-%m")]["expenses"] += t.amount

    return [
        {
            "month": month,
            "income": values["income"],
            "expenses": values["expenses"],
            "net": values["income"] - values["expenses"],
        }
        for month, values in sorted(months.items())
    ]


def account_net_flows(transactions, end_date=None):
    """
    Net completed flow per account id up to ``end_date`` (inclusive).

    Income credits its account, expense debits it, a transfer debits the
    source account and credits the destination.
    """
    flows = defaultdict(lambda: ZERO)
    for t in completed(transactions):
        if end_date is not None and t.date > end_date:
            continue
        if t.type == INCOME:
            flows[t.account_id] += t.amount
        elif t.type == EXPENSE:
            flows[t.account_id] -= t.amount
        elif t.type == TRANSFER:
            flows[t.account_id] -= t.amount
            if t.destination_account_id is not None:
                flows[t.destination_account_id] += t.amount
    return dict(flows)


def percentage(part, whole):
    """``part / whole * 100`` rounded to cents, 0 when ``whole`` is 0."""
    if not whole:
        return ZERO
    return (Decimal(part) / Decimal(whole) * HUNDRED).quantize(PERCENT_PLACES)


def budget_utilization(planned, actual):
    """Unclamped utilization of one budget category in percent."""
    return percentage(actual, planned)


def display_utilization(utilization):
    """Utilization clamped at 100 for progress-bar rendering."""
    return min(utilization, HUNDRED)


def budget_totals(categories):
    """Return ``(total_planned, total_actual)`` over budget categories."""
    planned = ZERO
    actual = ZERO
    for category in categories:
        planned += category.planned
        actual += category.actual
    return planned, actual


def overall_utilization(categories):
    """``sum(actual) / sum(planned) * 100`` over all categories of a budget."""
    planned, actual = budget_totals(categories)
    return percentage(actual, planned)


def goal_progress(current_amount, target_amount):
    """Unclamped goal progress in percent."""
    return percentage(current_amount, target_amount)
