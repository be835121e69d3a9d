from datetime import date
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from finance.mixins.owner_context import OwnerContext
from finance.models import Account, Budget, FinancialGoal, FinancialReport, Transaction
from finance.services import AccountService, BudgetService, ReportService, TransactionService
from finance.utils.account_tree import flatten_account_tree

# (name, type, children); a child is a name or a (name, children) pair
DEMO_ACCOUNTS = [
    ("Ativos", "ASSET", [
        "Conta Corrente",
        "Poupança",
        ("Investimentos", ["Renda Fixa", "Renda Variável"]),
    ]),
    ("Passivos", "LIABILITY", ["Cartão de Crédito", "Empréstimos"]),
    ("Receitas", "INCOME", ["Salário", "Investimentos", "Outras Receitas"]),
    ("Despesas", "EXPENSE", [
        ("Moradia", ["Aluguel", "Condomínio", "Água", "Luz", "Internet"]),
        ("Alimentação", ["Supermercado", "Restaurantes"]),
        ("Transporte", ["Combustível", "Transporte Público", "Manutenção"]),
        ("Saúde", ["Plano de Saúde", "Medicamentos", "Consultas"]),
        ("Educação", ["Mensalidades", "Cursos", "Materiais"]),
        ("Lazer", ["Viagens", "Restaurantes", "Entretenimento"]),
    ]),
]

CHECKING = "Ativos > Conta Corrente"
SAVINGS = "Ativos > Poupança"
CREDIT_CARD = "Passivos > Cartão de Crédito"

# (date, description, amount, type, account path, destination path, category)
DEMO_TRANSACTIONS = [
    (date(2025, 5, 1), "Salário", "5000", "INCOME", CHECKING, None, "Salário"),
    (date(2025, 5, 5), "Aluguel", "1500", "EXPENSE", CHECKING, None, "Moradia"),
    (date(2025, 5, 8), "Supermercado", "600", "EXPENSE", CHECKING, None, "Alimentação"),
    (date(2025, 5, 10), "Transferência para Poupança", "1000", "TRANSFER", CHECKING, SAVINGS, "Transferência"),
    (date(2025, 5, 15), "Fatura Cartão de Crédito", "1200", "EXPENSE", CHECKING, None, "Cartão de Crédito"),
    (date(2025, 5, 20), "Restaurante", "150", "EXPENSE", CREDIT_CARD, None, "Alimentação"),
    (date(2025, 5, 25), "Combustível", "200", "EXPENSE", CREDIT_CARD, None, "Transporte"),
    (date(2025, 5, 28), "Rendimento Poupança", "50", "INCOME", SAVINGS, None, "Investimentos"),
]

DEMO_BUDGET = {
    "name": "Orçamento Maio 2025",
    "start_date": date(2025, 5, 1),
    "end_date": date(2025, 5, 31),
    "categories": [
        ("Moradia", "1800", "1500"),
        ("Alimentação", "1000", "750"),
        ("Transporte", "500", "200"),
        ("Saúde", "400", "0"),
        ("Educação", "300", "300"),
        ("Lazer", "500", "150"),
    ],
}

DEMO_GOALS = [
    ("Fundo de Emergência", "20000", "10000", date(2025, 12, 31), "HIGH"),
    ("Viagem de Férias", "8000", "3000", date(2025, 7, 31), "MEDIUM"),
    ("Compra de Carro", "50000", "15000", date(2026, 12, 31), "LOW"),
]


class Command(BaseCommand):
    help = "Load the demo dataset (accounts, transactions, budget, goals, reports) for one owner"

    def add_arguments(self, parser):
        parser.add_argument(
            "--owner",
            required=True,
            help="Identity id (token 'sub' claim) that will own the demo records",
        )
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete the owner's existing records before loading",
        )

    def handle(self, *args, **options):
        owner_context = OwnerContext(owner_id=options["owner"])

        if Account.objects.for_owner(owner_context.owner_id).exists():
            if not options["flush"]:
                raise CommandError(
                    f"Owner {owner_context.owner_id} already has accounts. "
                    "Run with --flush to replace them."
                )
            self._flush(owner_context)
            self.stdout.write(self.style.WARNING("Existing records deleted"))

        with transaction.atomic():
            accounts = self._create_accounts(owner_context)
            self.stdout.write(f"Created {len(accounts)} accounts")

            for tx_date, description, amount, tx_type, source, destination, category in DEMO_TRANSACTIONS:
                TransactionService.create_transaction(
                    owner_context,
                    {
                        "date": tx_date,
                        "description": description,
                        "amount": Decimal(amount),
                        "type": tx_type,
                        "account_id": accounts[source].id,
                        "destination_account_id": accounts[destination].id if destination else None,
                        "category": category,
                        "status": Transaction.Status.COMPLETED,
                    },
                )
            self.stdout.write(f"Created {len(DEMO_TRANSACTIONS)} transactions")

            BudgetService.create_budget(
                owner_context,
                {
                    "name": DEMO_BUDGET["name"],
                    "start_date": DEMO_BUDGET["start_date"],
                    "end_date": DEMO_BUDGET["end_date"],
                    "categories": [
                        {"name": name, "planned": Decimal(planned), "actual": Decimal(actual)}
                        for name, planned, actual in DEMO_BUDGET["categories"]
                    ],
                },
            )

            for name, target, current, deadline, priority in DEMO_GOALS:
                FinancialGoal.objects.create(
                    owner_id=owner_context.owner_id,
                    name=name,
                    target_amount=Decimal(target),
                    current_amount=Decimal(current),
                    deadline=deadline,
                    priority=priority,
                )
            self.stdout.write(f"Created 1 budget and {len(DEMO_GOALS)} goals")

            period = (DEMO_BUDGET["start_date"], DEMO_BUDGET["end_date"])
            ReportService.generate_report(
                owner_context, FinancialReport.ReportType.INCOME_STATEMENT, *period, name="DRE Maio 2025"
            )
            ReportService.generate_report(
                owner_context, FinancialReport.ReportType.BALANCE_SHEET, *period, name="Balanço Maio 2025"
            )

        self.stdout.write(
            self.style.SUCCESS(f"Demo data loaded for owner {owner_context.owner_id}")
        )

    def _create_accounts(self, owner_context):
        """Create the demo chart of accounts; returns accounts keyed by path."""
        accounts = {}

        def create(name, account_type, parent, children):
            account = AccountService.create_account(
                owner_context,
                {"name": name, "type": account_type, "parent_id": parent.id if parent else None},
            )
            path = name if parent is None else f"{parent_path[parent.id]} > {name}"
            parent_path[account.id] = path
            accounts[path] = account

            for child in children:
                child_name, grandchildren = (child, []) if isinstance(child, str) else child
                create(child_name, account_type, account, grandchildren)

        parent_path = {}
        for name, account_type, children in DEMO_ACCOUNTS:
            create(name, account_type, None, children)
        return accounts

    @transaction.atomic
    def _flush(self, owner_context):
        owner_id = owner_context.owner_id
        Transaction.objects.for_owner(owner_id).delete()
        Budget.objects.for_owner(owner_id).delete()
        FinancialGoal.objects.for_owner(owner_id).delete()
        FinancialReport.objects.for_owner(owner_id).delete()

        # Children are listed after their parents, so delete from the end
        flattened = flatten_account_tree(Account.objects.for_owner(owner_id))
        for flat in reversed(flattened):
            flat.account.delete()
