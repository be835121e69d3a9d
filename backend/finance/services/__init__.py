# finance/services/__init__.py
from .account_service import AccountService
from .budget_service import BudgetService
from .dashboard_service import DashboardService
from .goal_service import GoalService
from .report_service import ReportService
from .transaction_service import TransactionService

__all__ = [
    "AccountService",
    "BudgetService",
    "DashboardService",
    "GoalService",
    "ReportService",
    "TransactionService",
]
