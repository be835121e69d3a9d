# finance/tests/conftest.py
from datetime import date
from decimal import Decimal

import pytest

from finance.models import Account, Transaction

from .factories import AccountFactory, BudgetFactory, BudgetCategoryFactory, TransactionFactory

# =============================================================================
# ACCOUNT FIXTURES
# =============================================================================


@pytest.fixture
def accounts(db, owner_id):
    """Small chart of accounts of the main identity, keyed by account name"""
    ativos = AccountFactory(owner_id=owner_id, name="Ativos", type=Account.AccountType.ASSET)
    passivos = AccountFactory(
        owner_id=owner_id, name="Passivos", type=Account.AccountType.LIABILITY
    )
    return {
        "Ativos": ativos,
        "Conta Corrente": AccountFactory(
            owner_id=owner_id, name="Conta Corrente", type=ativos.type, parent=ativos
        ),
        "Poupança": AccountFactory(
            owner_id=owner_id, name="Poupança", type=ativos.type, parent=ativos
        ),
        "Passivos": passivos,
        "Cartão de Crédito": AccountFactory(
            owner_id=owner_id,
            name="Cartão de Crédito",
            type=passivos.type,
            parent=passivos,
        ),
    }


@pytest.fixture
def foreign_account(db, other_owner_id):
    """Account of the second identity"""
    return AccountFactory(owner_id=other_owner_id, name="Conta Alheia")


# =============================================================================
# TRANSACTION FIXTURES
# =============================================================================


@pytest.fixture
def may_transactions(db, owner_id, accounts):
    """Completed May 2025 activity plus one pending and one April transaction"""
    checking = accounts["Conta Corrente"]
    savings = accounts["Poupança"]
    card = accounts["Cartão de Crédito"]

    def make(day, amount, tx_type, account, category, **kwargs):
        return TransactionFactory(
            owner_id=owner_id,
            date=day,
            amount=Decimal(amount),
            type=tx_type,
            account=account,
            category=category,
            **kwargs,
        )

    Type = Transaction.TransactionType
    return [
        make(date(2025, 4, 28), "300.00", Type.EXPENSE, checking, "Lazer"),
        make(date(2025, 5, 1), "5000.00", Type.INCOME, checking, "Salário"),
        make(date(2025, 5, 5), "1500.00", Type.EXPENSE, checking, "Moradia"),
        make(date(2025, 5, 8), "600.00", Type.EXPENSE, checking, "Alimentação"),
        make(
            date(2025, 5, 10),
            "1000.00",
            Type.TRANSFER,
            checking,
            "Transferência",
            destination_account=savings,
        ),
        make(date(2025, 5, 20), "150.00", Type.EXPENSE, card, "Alimentação"),
        make(date(2025, 5, 28), "50.00", Type.INCOME, savings, "Investimentos"),
        make(
            date(2025, 5, 30),
            "999.00",
            Type.EXPENSE,
            checking,
            "Moradia",
            status=Transaction.Status.PENDING,
        ),
    ]


# =============================================================================
# BUDGET FIXTURES
# =============================================================================


@pytest.fixture
def budget(db, owner_id):
    """May 2025 budget with an overspent and an untouched category"""
    budget = BudgetFactory(owner_id=owner_id, name="Orçamento Maio 2025")
    BudgetCategoryFactory(
        budget=budget, name="Alimentação", planned=Decimal("1000.00"), actual=Decimal("1200.00")
    )
    BudgetCategoryFactory(
        budget=budget, name="Saúde", planned=Decimal("400.00"), actual=Decimal("0.00")
    )
    return budget
