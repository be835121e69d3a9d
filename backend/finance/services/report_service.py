"""
Service for generating financial reports from the owner's records.

Builders are pure functions of already-fetched accounts and transactions.
``generate_report`` fetches the owner's data, builds the payload for the
requested report type and persists it.
"""

import logging

from ..models import Account, FinancialReport, Transaction
from ..reports import (
    BalanceSheet,
    CashFlow,
    CashFlowPeriod,
    IncomeStatement,
    ReportSection,
)
from ..utils.account_tree import flatten_account_tree
from ..utils.aggregation import (
    EXPENSE,
    INCOME,
    ZERO,
    account_net_flows,
    category_breakdown,
    monthly_totals,
    within_period,
)

logger = logging.getLogger(__name__)

ReportType = FinancialReport.ReportType


class ReportService:
    """
    Builds and persists income statements, balance sheets and cash flows.
    """

    @staticmethod
    def build_income_statement(transactions, start_date, end_date):
        """Income and expenses by category for completed transactions in the period."""
        scoped = within_period(transactions, start_date, end_date)
        return IncomeStatement(
            income=ReportSection(category_breakdown(scoped, INCOME)),
            expenses=ReportSection(category_breakdown(scoped, EXPENSE)),
        )

    @staticmethod
    def build_balance_sheet(accounts, transactions, end_date):
        """
        Asset and liability balances as of ``end_date``.

        Balances are derived from completed transactions dated on or before
        ``end_date``. Liability accounts report the amount owed, the negated
        net flow of the account. Categories are keyed by account path.
        """
        flows = account_net_flows(transactions, end_date=end_date)
        assets = {}
        liabilities = {}

        for flat in flatten_account_tree(accounts):
            account = flat.account
            balance = flows.get(account.id, ZERO)
            if account.type == Account.AccountType.ASSET:
                assets[flat.path] = assets.get(flat.path, ZERO) + balance
            elif account.type == Account.AccountType.LIABILITY:
                liabilities[flat.path] = liabilities.get(flat.path, ZERO) - balance

        return BalanceSheet(
            assets=ReportSection(assets),
            liabilities=ReportSection(liabilities),
        )

    @staticmethod
    def build_cash_flow(transactions, start_date, end_date):
        """
        Completed inflows (income) and outflows (expenses) in the period.

        Transfers move money between the owner's own accounts and are left out.
        """
        scoped = within_period(transactions, start_date, end_date)
        periods = tuple(
            CashFlowPeriod(
                month=month["month"],
                inflows=month["income"],
                outflows=month["expenses"],
            )
            for month in monthly_totals(scoped)
        )
        return CashFlow(
            inflows=ReportSection(category_breakdown(scoped, INCOME)),
            outflows=ReportSection(category_breakdown(scoped, EXPENSE)),
            periods=periods,
        )

    @staticmethod
    def default_report_name(report_type, start_date, end_date):
        return f"{ReportType(report_type).label} {start_date.isoformat()} to {end_date.isoformat()}"

    @staticmethod
    def generate_report(owner_context, report_type, start_date, end_date, name=None):
        """
        Compute a report from the owner's records and store it.

        Args:
            owner_context: OwnerContext of the request
            report_type: One of FinancialReport.ReportType
            start_date: First day of the period (inclusive)
            end_date: Last day of the period (inclusive)
            name: Optional report name, derived from type and period when empty

        Returns:
            FinancialReport: The persisted report
        """
        owner_id = owner_context.owner_id
        completed = Transaction.objects.for_owner(owner_id).filter(
            status=Transaction.Status.COMPLETED, date__lte=end_date
        )

        if report_type == ReportType.INCOME_STATEMENT:
            payload = ReportService.build_income_statement(
                list(completed.filter(date__gte=start_date)), start_date, end_date
            )
        elif report_type == ReportType.BALANCE_SHEET:
            payload = ReportService.build_balance_sheet(
                list(Account.objects.for_owner(owner_id)), list(completed), end_date
            )
        elif report_type == ReportType.CASH_FLOW:
            payload = ReportService.build_cash_flow(
                list(completed.filter(date__gte=start_date)), start_date, end_date
            )
        else:
            raise ValueError(f"Unsupported report type: {report_type}")

        report = FinancialReport.objects.create(
            owner_id=owner_id,
            name=name or ReportService.default_report_name(report_type, start_date, end_date),
            type=report_type,
            start_date=start_date,
            end_date=end_date,
            data=payload.to_dict(),
        )

        logger.info(
            "Financial report generated",
            extra={
                "owner_id": owner_id,
                "report_id": str(report.id),
                "report_type": report_type,
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
                "action": "report_generated",
                "component": "ReportService",
            },
        )
        return report
