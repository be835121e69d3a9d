"""
Service assembling the dashboard summary.
"""

import logging

from ..models import Transaction
from ..utils.aggregation import (
    EXPENSE,
    INCOME,
    category_breakdown,
    compute_totals,
    monthly_totals,
)

logger = logging.getLogger(__name__)

RECENT_TRANSACTIONS = 5


class DashboardService:
    """Totals, breakdowns and recent activity for the owner's dashboard."""

    @staticmethod
    def build_summary(owner_context, start_date=None, end_date=None):
        """
        Summarize the owner's transactions, optionally within a date range.

        Returns:
            dict: ``totalIncome``, ``totalExpenses``, ``balance``,
            ``incomeByCategory``, ``expensesByCategory``, ``monthly`` and
            ``recentTransactions``
        """
        queryset = Transaction.objects.for_owner(owner_context.owner_id)
        if start_date is not None:
            queryset = queryset.filter(date__gte=start_date)
        if end_date is not None:
            queryset = queryset.filter(date__lte=end_date)

        transactions = list(queryset)

        summary = {
            **compute_totals(transactions),
            "incomeByCategory": category_breakdown(transactions, INCOME),
            "expensesByCategory": category_breakdown(transactions, EXPENSE),
            "monthly": monthly_totals(transactions),
            # Queryset ordering is newest first
            "recentTransactions": transactions[:RECENT_TRANSACTIONS],
        }

        logger.debug(
            "Dashboard summary built",
            extra={
                "owner_id": owner_context.owner_id,
                "transaction_count": len(transactions),
                "action": "dashboard_summary_built",
                "component": "DashboardService",
            },
        )
        return summary
