# finance/tests/unit/test_service_report.py
from datetime import date
from decimal import Decimal

import pytest

from finance.models import FinancialReport
from finance.reports import load_report_data
from finance.services.dashboard_service import DashboardService
from finance.services.report_service import ReportService

pytestmark = pytest.mark.django_db

MAY_START = date(2025, 5, 1)
MAY_END = date(2025, 5, 31)


class TestGenerateReport:
    """ReportService.generate_report over the May fixture data"""

    def test_income_statement(self, owner_context, may_transactions):
        report = ReportService.generate_report(
            owner_context, FinancialReport.ReportType.INCOME_STATEMENT, MAY_START, MAY_END
        )

        assert report.owner_id == owner_context.owner_id
        assert report.name == "Income statement 2025-05-01 to 2025-05-31"
        assert report.data == {
            "income": {
                "total": "5050.00",
                "categories": {"Investimentos": "50.00", "Salário": "5000.00"},
            },
            "expenses": {
                "total": "2250.00",
                "categories": {"Alimentação": "750.00", "Moradia": "1500.00"},
            },
            "netIncome": "2800.00",
        }

    def test_balance_sheet_uses_account_paths(self, owner_context, may_transactions):
        report = ReportService.generate_report(
            owner_context,
            FinancialReport.ReportType.BALANCE_SHEET,
            MAY_START,
            MAY_END,
            name="Balanço Maio",
        )

        assert report.name == "Balanço Maio"
        assert report.data["assets"]["categories"] == {
            "Ativos": "0.00",
            "Ativos > Conta Corrente": "1600.00",
            "Ativos > Poupança": "1050.00",
        }
        assert report.data["liabilities"] == {
            "total": "150.00",
            "categories": {"Passivos": "0.00", "Passivos > Cartão de Crédito": "150.00"},
        }
        assert report.data["equity"] == "2500.00"

    def test_balance_sheet_ignores_later_transactions(self, owner_context, may_transactions):
        report = ReportService.generate_report(
            owner_context,
            FinancialReport.ReportType.BALANCE_SHEET,
            date(2025, 4, 1),
            date(2025, 4, 30),
        )

        assert report.data["assets"]["total"] == "-300.00"

    def test_cash_flow(self, owner_context, may_transactions):
        report = ReportService.generate_report(
            owner_context, FinancialReport.ReportType.CASH_FLOW, date(2025, 4, 1), MAY_END
        )

        assert report.data["netCashFlow"] == "2500.00"
        assert [period["month"] for period in report.data["periods"]] == ["2025-04", "2025-05"]

    def test_stored_data_satisfies_the_accounting_identities(self, owner_context, may_transactions):
        for report_type in FinancialReport.ReportType.values:
            report = ReportService.generate_report(owner_context, report_type, MAY_START, MAY_END)

            # Parsing recomputes totals and rejects mismatching ones
            assert load_report_data(report.type, report.data).to_dict() == report.data

    def test_other_owners_activity_is_ignored(self, other_owner_context, may_transactions):
        report = ReportService.generate_report(
            other_owner_context,
            FinancialReport.ReportType.INCOME_STATEMENT,
            MAY_START,
            MAY_END,
        )

        assert report.data["netIncome"] == "0.00"
        assert report.data["income"]["categories"] == {}

    def test_unsupported_type(self, owner_context):
        with pytest.raises(ValueError):
            ReportService.generate_report(owner_context, "FORECAST", MAY_START, MAY_END)


class TestDashboardSummary:
    def test_summary_over_all_transactions(self, owner_context, may_transactions):
        summary = DashboardService.build_summary(owner_context)

        assert summary["totalIncome"] == Decimal("5050.00")
        assert summary["totalExpenses"] == Decimal("2550.00")
        assert summary["balance"] == Decimal("2500.00")
        assert summary["expensesByCategory"] == {
            "Alimentação": Decimal("750.00"),
            "Lazer": Decimal("300.00"),
            "Moradia": Decimal("1500.00"),
        }
        assert [m["month"] for m in summary["monthly"]] == ["2025-04", "2025-05"]

    def test_recent_transactions_are_the_five_newest(self, owner_context, may_transactions):
        summary = DashboardService.build_summary(owner_context)

        recent = summary["recentTransactions"]
        assert len(recent) == 5
        assert recent[0].date == date(2025, 5, 30)
        assert recent[-1].date == date(2025, 5, 8)

    def test_summary_within_range(self, owner_context, may_transactions):
        summary = DashboardService.build_summary(
            owner_context, start_date=date(2025, 4, 1), end_date=date(2025, 4, 30)
        )

        assert summary["totalExpenses"] == Decimal("300.00")
        assert summary["totalIncome"] == Decimal("0")
        assert summary["incomeByCategory"] == {}

    def test_empty_summary(self, owner_context):
        summary = DashboardService.build_summary(owner_context)

        assert summary["balance"] == Decimal("0")
        assert summary["monthly"] == []
        assert summary["recentTransactions"] == []
