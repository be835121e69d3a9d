"""
Database models for the financial management system.

Every record belongs to exactly one owner, the identity id resolved from the
bearer token. Owner scoping is applied through ``OwnedQuerySet.for_owner`` on
every read and write path. Amounts are stored as decimals with two places in
the owner's preferred currency.
"""

import uuid

from django.db import models

from .managers import BudgetCategoryQuerySet, OwnedQuerySet
from .utils.aggregation import (
    budget_totals,
    budget_utilization,
    display_utilization,
    goal_progress,
    overall_utilization,
)

MONEY_DIGITS = 14
MONEY_PLACES = 2


class OwnedRecord(models.Model):
    """Common columns of every owner-scoped record."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.CharField(max_length=64, db_index=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OwnedQuerySet.as_manager()

    class Meta:
        abstract = True


# -------------------------------------------------------------------
# ACCOUNTS
# -------------------------------------------------------------------
# Chart of accounts forming a forest through the parent reference


class Account(OwnedRecord):
    """
    Account in the owner's chart of accounts.

    Accounts may be nested under a parent account of the same owner. A parent
    cannot be deleted while it has children or while transactions reference it.
    """

    class AccountType(models.TextChoices):
        ASSET = "ASSET", "Asset"
        LIABILITY = "LIABILITY", "Liability"
        EQUITY = "EQUITY", "Equity"
        INCOME = "INCOME", "Income"
        EXPENSE = "EXPENSE", "Expense"

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=10, choices=AccountType.choices)
    parent = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="children",
    )

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["owner_id", "type"], name="idx_account_owner_type"),
        ]

    def __str__(self):
        return f"{self.name} ({self.type})"


# -------------------------------------------------------------------
# TRANSACTIONS
# -------------------------------------------------------------------


class Transaction(OwnedRecord):
    """
    Single-sided financial transaction.

    Income and expense transactions touch one account. Transfers move money
    from ``account`` to ``destination_account``.
    """

    class TransactionType(models.TextChoices):
        INCOME = "INCOME", "Income"
        EXPENSE = "EXPENSE", "Expense"
        TRANSFER = "TRANSFER", "Transfer"

    class Status(models.TextChoices):
        PENDING = "PENDING", "Pending"
        COMPLETED = "COMPLETED", "Completed"
        CANCELED = "CANCELED", "Canceled"

    date = models.DateField()
    description = models.CharField(max_length=255, blank=True)
    amount = models.DecimalField(max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES)
    type = models.CharField(max_length=10, choices=TransactionType.choices)
    account = models.ForeignKey(
        Account, on_delete=models.PROTECT, related_name="transactions"
    )
    destination_account = models.ForeignKey(
        Account,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="incoming_transfers",
    )
    category = models.CharField(max_length=100, blank=True)
    tags = models.JSONField(default=list, blank=True)
    payment_method = models.CharField(max_length=50, blank=True)
    status = models.CharField(
        max_length=10, choices=Status.choices, default=Status.PENDING
    )

    class Meta:
        # Insertion order breaks ties between transactions of the same day
        ordering = ["-date", "created_at"]
        indexes = [
            models.Index(fields=["owner_id", "date"], name="idx_tx_owner_date"),
            models.Index(fields=["owner_id", "type"], name="idx_tx_owner_type"),
            models.Index(fields=["owner_id", "status"], name="idx_tx_owner_status"),
        ]

    def __str__(self):
        return f"{self.date} | {self.type} | {self.amount}"


# -------------------------------------------------------------------
# BUDGETS
# -------------------------------------------------------------------


class Budget(OwnedRecord):
    """Spending plan for a period, split into categories."""

    name = models.CharField(max_length=255)
    start_date = models.DateField()
    end_date = models.DateField()

    class Meta:
        ordering = ["-start_date", "name"]
        indexes = [
            models.Index(fields=["owner_id", "start_date"], name="idx_budget_owner_start"),
        ]

    @property
    def total_planned(self):
        return budget_totals(self.categories.all())[0]

    @property
    def total_actual(self):
        return budget_totals(self.categories.all())[1]

    @property
    def utilization(self):
        return overall_utilization(self.categories.all())

    def __str__(self):
        return f"{self.name} ({self.start_date} - {self.end_date})"


class BudgetCategory(models.Model):
    """Planned and actual spending for one category of a budget."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    budget = models.ForeignKey(
        Budget, on_delete=models.CASCADE, related_name="categories"
    )
    name = models.CharField(max_length=100)
    planned = models.DecimalField(
        max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES, default=0
    )
    actual = models.DecimalField(
        max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES, default=0
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BudgetCategoryQuerySet.as_manager()

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "Budget categories"

    @property
    def utilization(self):
        return budget_utilization(self.planned, self.actual)

    @property
    def display_utilization(self):
        return display_utilization(self.utilization)

    def __str__(self):
        return f"{self.budget.name} | {self.name}"


# -------------------------------------------------------------------
# GOALS
# -------------------------------------------------------------------


class FinancialGoal(OwnedRecord):
    """Savings target with a deadline."""

    class Priority(models.TextChoices):
        LOW = "LOW", "Low"
        MEDIUM = "MEDIUM", "Medium"
        HIGH = "HIGH", "High"

    name = models.CharField(max_length=255)
    target_amount = models.DecimalField(
        max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES
    )
    current_amount = models.DecimalField(
        max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES, default=0
    )
    deadline = models.DateField()
    priority = models.CharField(
        max_length=10, choices=Priority.choices, default=Priority.MEDIUM
    )

    class Meta:
        ordering = ["deadline", "name"]

    @property
    def progress(self):
        return goal_progress(self.current_amount, self.target_amount)

    def __str__(self):
        return self.name


# -------------------------------------------------------------------
# REPORTS
# -------------------------------------------------------------------


class FinancialReport(OwnedRecord):
    """
    Generated financial report.

    ``data`` holds the JSON form of the payload class registered for
    ``type`` in ``finance.reports.REPORT_PAYLOADS``.
    """

    class ReportType(models.TextChoices):
        INCOME_STATEMENT = "INCOME_STATEMENT", "Income statement"
        BALANCE_SHEET = "BALANCE_SHEET", "Balance sheet"
        CASH_FLOW = "CASH_FLOW", "Cash flow"

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=20, choices=ReportType.choices)
    start_date = models.DateField()
    end_date = models.DateField()
    data = models.JSONField(default=dict)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["owner_id", "type"], name="idx_report_owner_type"),
        ]

    def __str__(self):
        return f"{self.name} ({self.type})"
