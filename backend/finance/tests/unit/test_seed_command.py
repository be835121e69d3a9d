# finance/tests/unit/test_seed_command.py
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from finance.models import (
    Account,
    Budget,
    BudgetCategory,
    FinancialGoal,
    FinancialReport,
    Transaction,
)

pytestmark = pytest.mark.django_db


def seed(owner_id, **options):
    out = StringIO()
    call_command("seed_demo_data", owner=owner_id, stdout=out, **options)
    return out.getvalue()


class TestSeedDemoData:
    def test_loads_demo_dataset(self, owner_id):
        output = seed(owner_id)

        assert f"Demo data loaded for owner {owner_id}" in output
        assert Account.objects.for_owner(owner_id).count() == 39
        assert Transaction.objects.for_owner(owner_id).count() == 8
        assert Budget.objects.for_owner(owner_id).count() == 1
        assert BudgetCategory.objects.for_owner(owner_id).count() == 6
        assert FinancialGoal.objects.for_owner(owner_id).count() == 3

    def test_generated_income_statement(self, owner_id):
        seed(owner_id)

        report = FinancialReport.objects.for_owner(owner_id).get(
            type=FinancialReport.ReportType.INCOME_STATEMENT
        )
        assert report.name == "DRE Maio 2025"
        assert report.data["income"]["total"] == "5050.00"
        assert report.data["netIncome"] == "1400.00"

    def test_transfer_points_at_savings(self, owner_id):
        seed(owner_id)

        transfer = Transaction.objects.for_owner(owner_id).get(type="TRANSFER")
        assert transfer.account.name == "Conta Corrente"
        assert transfer.destination_account.name == "Poupança"

    def test_existing_data_requires_flush(self, owner_id):
        seed(owner_id)

        with pytest.raises(CommandError):
            seed(owner_id)

    def test_flush_replaces_existing_data(self, owner_id):
        seed(owner_id)

        seed(owner_id, flush=True)

        assert Account.objects.for_owner(owner_id).count() == 39
        assert Transaction.objects.for_owner(owner_id).count() == 8
        assert FinancialReport.objects.for_owner(owner_id).count() == 2

    def test_other_owners_are_untouched(self, owner_id, other_owner_id):
        seed(other_owner_id)

        seed(owner_id)
        seed(owner_id, flush=True)

        assert Account.objects.for_owner(other_owner_id).count() == 39
