"""
Serializers for the financial management API.

Field names on the wire are camelCase; model attributes stay snake_case and
are mapped with ``source``. Owner, id and timestamp fields are read-only: the
owner of new records comes from the request's OwnerContext.

Architecture Pattern:
Serializer (Field validation) -> Business Services -> Database
         |
ServiceExceptionHandlerMixin (Unified Error Handling)
"""

import logging
from decimal import Decimal

from rest_framework import serializers

from .mixins.owner_assignment import OwnerAssignmentMixin
from .models import Account, Budget, BudgetCategory, FinancialGoal, FinancialReport, Transaction
from .reports import ReportDataError, load_report_data

logger = logging.getLogger(__name__)

MONEY = {"max_digits": 14, "decimal_places": 2}


def money_field(**kwargs):
    return serializers.DecimalField(max_digits=None, decimal_places=2, **kwargs)


def percent_field(**kwargs):
    return money_field(read_only=True, **kwargs)


def validate_date_order(start_date, end_date, field_name="endDate"):
    """Reject periods whose end precedes their start."""
    if start_date and end_date and end_date < start_date:
        raise serializers.ValidationError(
            {field_name: ["End date must be on or after the start date."]}
        )


# -------------------------------------------------------------------
# BASE
# -------------------------------------------------------------------


class OwnedRecordSerializer(OwnerAssignmentMixin, serializers.ModelSerializer):
    """Common read-only fields of owner-scoped records."""

    ownerId = serializers.CharField(source="owner_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)


# -------------------------------------------------------------------
# ACCOUNTS
# -------------------------------------------------------------------


class AccountSerializer(OwnedRecordSerializer):
    """
    Account serializer.

    ``parentId`` is checked against the owner's accounts by AccountService,
    which also rejects cycles. A full update (PUT) must send ``parentId``,
    null for a root account; PATCH keeps the stored parent when omitted.
    """

    parentId = serializers.UUIDField(source="parent_id", required=False, allow_null=True)

    class Meta:
        model = Account
        fields = ["id", "name", "type", "parentId", "ownerId", "createdAt", "updatedAt"]
        read_only_fields = ["id"]

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name is required.")
        return value.strip()

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if self.instance is not None and not self.partial and "parent_id" not in attrs:
            raise serializers.ValidationError({"parentId": ["This field is required."]})
        return attrs


class AccountTreeEntrySerializer(serializers.Serializer):
    """One flattened account with its depth and display path."""

    id = serializers.UUIDField(source="account.id")
    name = serializers.CharField(source="account.name")
    type = serializers.CharField(source="account.type")
    parentId = serializers.UUIDField(source="account.parent_id", allow_null=True)
    depth = serializers.IntegerField()
    path = serializers.CharField()


class AccountFilterSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=Account.AccountType.choices, required=False)


# -------------------------------------------------------------------
# TRANSACTIONS
# -------------------------------------------------------------------


class TransactionSerializer(OwnedRecordSerializer):
    """
    Transaction serializer.

    Field rules are checked here. Account ownership, the transfer destination
    and clearing the destination of non-transfers are handled by
    TransactionService on every create and update.
    """

    amount = serializers.DecimalField(**MONEY)
    accountId = serializers.UUIDField(source="account_id")
    destinationAccountId = serializers.UUIDField(
        source="destination_account_id", required=False, allow_null=True
    )
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50), required=False
    )
    paymentMethod = serializers.CharField(
        source="payment_method", required=False, allow_blank=True, max_length=50
    )

    class Meta:
        model = Transaction
        fields = [
            "id",
            "date",
            "description",
            "amount",
            "type",
            "accountId",
            "destinationAccountId",
            "category",
            "tags",
            "paymentMethod",
            "status",
            "ownerId",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Amount must be greater than zero.")
        return value


class TransactionFilterSerializer(serializers.Serializer):
    """Query parameters accepted by the transaction listing."""

    startDate = serializers.DateField(source="start_date", required=False)
    endDate = serializers.DateField(source="end_date", required=False)
    type = serializers.ChoiceField(
        choices=Transaction.TransactionType.choices, required=False
    )
    accountId = serializers.UUIDField(source="account_id", required=False)
    category = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Transaction.Status.choices, required=False)

    def validate(self, attrs):
        validate_date_order(attrs.get("start_date"), attrs.get("end_date"))
        return attrs


# -------------------------------------------------------------------
# BUDGETS
# -------------------------------------------------------------------


class BudgetCategorySerializer(serializers.ModelSerializer):
    """Budget category with its utilization percentages."""

    budgetId = serializers.UUIDField(source="budget_id", read_only=True)
    utilization = percent_field()
    displayUtilization = percent_field(source="display_utilization")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = BudgetCategory
        fields = [
            "id",
            "budgetId",
            "name",
            "planned",
            "actual",
            "utilization",
            "displayUtilization",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]
        extra_kwargs = {
            "planned": {"min_value": Decimal("0")},
            "actual": {"min_value": Decimal("0")},
        }


class BudgetSerializer(OwnedRecordSerializer):
    """
    Budget with nested categories.

    Categories submitted on create or update replace the budget's category
    set as a whole; see BudgetService.
    """

    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")
    categories = BudgetCategorySerializer(many=True, required=False)
    totalPlanned = money_field(source="total_planned", read_only=True)
    totalActual = money_field(source="total_actual", read_only=True)
    utilization = percent_field()

    class Meta:
        model = Budget
        fields = [
            "id",
            "name",
            "startDate",
            "endDate",
            "categories",
            "totalPlanned",
            "totalActual",
            "utilization",
            "ownerId",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]

    def validate(self, attrs):
        attrs = super().validate(attrs)
        validate_date_order(
            attrs.get("start_date", getattr(self.instance, "start_date", None)),
            attrs.get("end_date", getattr(self.instance, "end_date", None)),
        )
        return attrs


# -------------------------------------------------------------------
# GOALS
# -------------------------------------------------------------------


class FinancialGoalSerializer(OwnedRecordSerializer):
    """Financial goal with its unclamped progress percentage."""

    targetAmount = serializers.DecimalField(source="target_amount", **MONEY)
    currentAmount = serializers.DecimalField(
        source="current_amount", required=False, min_value=Decimal("0"), **MONEY
    )
    progress = percent_field()

    class Meta:
        model = FinancialGoal
        fields = [
            "id",
            "name",
            "targetAmount",
            "currentAmount",
            "deadline",
            "priority",
            "progress",
            "ownerId",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]

    def validate_targetAmount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Target amount must be greater than zero.")
        return value


class GoalProgressSerializer(serializers.Serializer):
    currentAmount = serializers.DecimalField(
        source="current_amount", min_value=Decimal("0"), **MONEY
    )


class GoalFilterSerializer(serializers.Serializer):
    priority = serializers.ChoiceField(
        choices=FinancialGoal.Priority.choices, required=False
    )


# -------------------------------------------------------------------
# REPORTS
# -------------------------------------------------------------------


class FinancialReportSerializer(OwnedRecordSerializer):
    """
    Financial report serializer.

    ``data`` is parsed into the payload class of the report type; derived
    values are recomputed and stored in normalized form.
    """

    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")
    data = serializers.JSONField()

    class Meta:
        model = FinancialReport
        fields = [
            "id",
            "name",
            "type",
            "startDate",
            "endDate",
            "data",
            "ownerId",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]

    def validate(self, attrs):
        attrs = super().validate(attrs)
        validate_date_order(
            attrs.get("start_date", getattr(self.instance, "start_date", None)),
            attrs.get("end_date", getattr(self.instance, "end_date", None)),
        )

        if "data" in attrs or "type" in attrs:
            report_type = attrs.get("type", getattr(self.instance, "type", None))
            raw_data = attrs.get("data", getattr(self.instance, "data", None))
            try:
                attrs["data"] = load_report_data(report_type, raw_data).to_dict()
            except ReportDataError as exc:
                logger.warning(
                    "Report data rejected",
                    extra={
                        "report_type": report_type,
                        "error_fields": list(exc.errors.keys()),
                        "action": "report_data_rejected",
                        "component": "FinancialReportSerializer",
                    },
                )
                raise serializers.ValidationError({"data": exc.errors})

        return attrs


class ReportGenerateSerializer(serializers.Serializer):
    """Request body of the report generation endpoints."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")

    def validate(self, attrs):
        validate_date_order(attrs.get("start_date"), attrs.get("end_date"))
        return attrs


class ReportFilterSerializer(serializers.Serializer):
    type = serializers.ChoiceField(
        choices=FinancialReport.ReportType.choices, required=False
    )


# -------------------------------------------------------------------
# DASHBOARD
# -------------------------------------------------------------------


class MonthlyTotalSerializer(serializers.Serializer):
    month = serializers.CharField()
    income = money_field()
    expenses = money_field()
    net = money_field()


class DashboardSerializer(serializers.Serializer):
    """Read-only dashboard summary built by DashboardService."""

    totalIncome = money_field()
    totalExpenses = money_field()
    balance = money_field()
    incomeByCategory = serializers.DictField(child=money_field())
    expensesByCategory = serializers.DictField(child=money_field())
    monthly = MonthlyTotalSerializer(many=True)
    recentTransactions = TransactionSerializer(many=True)


class DashboardFilterSerializer(serializers.Serializer):
    startDate = serializers.DateField(source="start_date", required=False)
    endDate = serializers.DateField(source="end_date", required=False)

    def validate(self, attrs):
        validate_date_order(attrs.get("start_date"), attrs.get("end_date"))
        return attrs
