"""
API views for the financial management system.

ViewSets are thin: serializers validate fields, services apply business rules
and every queryset is scoped to the owner of the request. Responses are
wrapped in the uniform success envelope; errors are formatted by the
project exception handler.
"""

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.pagination import EnvelopeLimitOffsetPagination
from core.responses import EnvelopeResponseMixin, envelope

from .mixins import OwnerContextMixin, ServiceExceptionHandlerMixin
from .models import Account, Budget, BudgetCategory, FinancialGoal, FinancialReport, Transaction
from .serializers import (
    AccountFilterSerializer,
    AccountSerializer,
    AccountTreeEntrySerializer,
    BudgetCategorySerializer,
    BudgetSerializer,
    DashboardFilterSerializer,
    DashboardSerializer,
    FinancialGoalSerializer,
    FinancialReportSerializer,
    GoalFilterSerializer,
    GoalProgressSerializer,
    ReportFilterSerializer,
    ReportGenerateSerializer,
    TransactionFilterSerializer,
    TransactionSerializer,
)
from .services import (
    AccountService,
    BudgetService,
    DashboardService,
    GoalService,
    ReportService,
    TransactionService,
)

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# BASE VIEWSET
# -------------------------------------------------------------------


class BaseOwnedViewSet(
    EnvelopeResponseMixin,
    OwnerContextMixin,
    ServiceExceptionHandlerMixin,
    viewsets.ModelViewSet,
):
    """
    Base ViewSet for owner-scoped resources.

    Provides:
    - Owner-filtered querysets (foreign records behave as missing ones)
    - limit/offset pagination in the list envelope
    - Query parameter validation through ``filter_serializer_class``
    - 200 with a message on delete
    """

    model = None
    filter_serializer_class = None
    permission_classes = [IsAuthenticated]
    pagination_class = EnvelopeLimitOffsetPagination

    def get_queryset(self):
        return self.model.objects.for_owner(self.owner_context.owner_id)

    def get_filters(self):
        """Validate listing query parameters; malformed values answer 400."""
        if self.filter_serializer_class is None:
            return {}
        serializer = self.filter_serializer_class(data=self.request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    def filter_queryset(self, queryset):
        queryset = super().filter_queryset(queryset)
        if self.action != "list":
            return queryset
        filters = {key: value for key, value in self.get_filters().items() if value}
        return queryset.filter(**filters)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)

        logger.info(
            "Record deleted",
            extra={
                "owner_id": self.owner_context.owner_id,
                "model_name": self.model.__name__,
                "record_id": str(kwargs.get(self.lookup_field)),
                "action": "record_deleted",
                "component": self.__class__.__name__,
            },
        )
        return envelope(
            message=f"{self.model._meta.verbose_name.capitalize()} deleted successfully"
        )


# -------------------------------------------------------------------
# ACCOUNTS
# -------------------------------------------------------------------


class AccountViewSet(BaseOwnedViewSet):
    """
    Chart of accounts. Hierarchy rules live in AccountService.
    """

    model = Account
    serializer_class = AccountSerializer
    filter_serializer_class = AccountFilterSerializer

    def perform_create(self, serializer):
        serializer.instance = self.handle_service_call(
            AccountService.create_account, self.owner_context, serializer.validated_data
        )

    def perform_update(self, serializer):
        serializer.instance = self.handle_service_call(
            AccountService.update_account,
            self.owner_context,
            serializer.instance,
            serializer.validated_data,
        )

    def perform_destroy(self, instance):
        self.handle_service_call(AccountService.delete_account, self.owner_context, instance)

    @action(detail=False, methods=["get"])
    def tree(self, request):
        """Accounts flattened depth-first with their display paths."""
        entries = self.handle_service_call(AccountService.get_account_tree, self.owner_context)
        return envelope(data=AccountTreeEntrySerializer(entries, many=True).data)


# -------------------------------------------------------------------
# TRANSACTIONS
# -------------------------------------------------------------------


class TransactionViewSet(BaseOwnedViewSet):
    """
    THIN ViewSet for transactions.
    Listing filters are validated by TransactionFilterSerializer and applied by
    TransactionService; account references are checked on every write.
    """

    model = Transaction
    serializer_class = TransactionSerializer
    filter_serializer_class = TransactionFilterSerializer

    def filter_queryset(self, queryset):
        if self.action != "list":
            return queryset
        filters = self.get_filters()

        logger.debug(
            "Building transactions listing",
            extra={
                "owner_id": self.owner_context.owner_id,
                "filters": sorted(filters.keys()),
                "action": "transactions_listing",
                "component": "TransactionViewSet",
            },
        )
        return TransactionService.filter_transactions(queryset, filters)

    def perform_create(self, serializer):
        serializer.instance = self.handle_service_call(
            TransactionService.create_transaction,
            self.owner_context,
            serializer.validated_data,
        )

    def perform_update(self, serializer):
        serializer.instance = self.handle_service_call(
            TransactionService.update_transaction,
            self.owner_context,
            serializer.instance,
            serializer.validated_data,
        )


# -------------------------------------------------------------------
# BUDGETS
# -------------------------------------------------------------------


class BudgetViewSet(BaseOwnedViewSet):
    """Budgets with nested categories."""

    model = Budget
    serializer_class = BudgetSerializer

    def get_queryset(self):
        return super().get_queryset().prefetch_related("categories")

    def perform_create(self, serializer):
        serializer.instance = self.handle_service_call(
            BudgetService.create_budget, self.owner_context, serializer.validated_data
        )

    def perform_update(self, serializer):
        serializer.instance = self.handle_service_call(
            BudgetService.update_budget,
            self.owner_context,
            serializer.instance,
            serializer.validated_data,
        )


class BudgetCategoryViewSet(BaseOwnedViewSet):
    """
    Categories of one budget, reachable only through a budget of the owner.
    """

    model = BudgetCategory
    serializer_class = BudgetCategorySerializer
    budget = None

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.budget = self.handle_service_call(
            BudgetService.get_owned_budget, self.owner_context, kwargs.get("budget_pk")
        )

    def get_queryset(self):
        return super().get_queryset().filter(budget=self.budget)

    def perform_create(self, serializer):
        serializer.save(budget=self.budget)


# -------------------------------------------------------------------
# GOALS
# -------------------------------------------------------------------


class FinancialGoalViewSet(BaseOwnedViewSet):
    """Financial goals with a dedicated progress update."""

    model = FinancialGoal
    serializer_class = FinancialGoalSerializer
    filter_serializer_class = GoalFilterSerializer

    @action(detail=True, methods=["patch"], url_path="progress")
    def progress(self, request, pk=None):
        goal = self.get_object()
        serializer = GoalProgressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        goal = self.handle_service_call(
            GoalService.update_progress,
            self.owner_context,
            goal,
            serializer.validated_data["current_amount"],
        )
        return envelope(
            data=self.get_serializer(goal).data,
            message="Goal progress updated successfully",
        )


# -------------------------------------------------------------------
# REPORTS
# -------------------------------------------------------------------


class FinancialReportViewSet(BaseOwnedViewSet):
    """
    Stored financial reports plus generation from the owner's records.
    """

    model = FinancialReport
    serializer_class = FinancialReportSerializer
    filter_serializer_class = ReportFilterSerializer

    def _generate(self, request, report_type):
        serializer = ReportGenerateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        report = self.handle_service_call(
            ReportService.generate_report,
            self.owner_context,
            report_type,
            data["start_date"],
            data["end_date"],
            name=data.get("name"),
        )
        return envelope(
            data=self.get_serializer(report).data,
            message="Report generated successfully",
            status_code=201,
        )

    @action(detail=False, methods=["post"], url_path="generate/income-statement")
    def generate_income_statement(self, request):
        return self._generate(request, FinancialReport.ReportType.INCOME_STATEMENT)

    @action(detail=False, methods=["post"], url_path="generate/balance-sheet")
    def generate_balance_sheet(self, request):
        return self._generate(request, FinancialReport.ReportType.BALANCE_SHEET)

    @action(detail=False, methods=["post"], url_path="generate/cash-flow")
    def generate_cash_flow(self, request):
        return self._generate(request, FinancialReport.ReportType.CASH_FLOW)


# -------------------------------------------------------------------
# DASHBOARD
# -------------------------------------------------------------------


class DashboardView(
    EnvelopeResponseMixin, OwnerContextMixin, ServiceExceptionHandlerMixin, APIView
):
    """Totals, category breakdowns, monthly series and recent transactions."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        filters = DashboardFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        summary = self.handle_service_call(
            DashboardService.build_summary,
            self.owner_context,
            start_date=filters.validated_data.get("start_date"),
            end_date=filters.validated_data.get("end_date"),
        )
        return Response(DashboardSerializer(summary).data)
