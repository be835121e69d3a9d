"""
Typed payloads for financial report data.

A report's ``data`` is a tagged union keyed by the report type: each type has
exactly one payload class, registered in ``REPORT_PAYLOADS``. Payloads are
parsed from stored/submitted JSON with ``load_report_data`` and serialized back
with ``to_dict``. Derived values (section totals, net income, equity, net cash
flow) are always recomputed from the categories, so the accounting identities
hold for every stored report.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

ZERO = Decimal("0.00")
TWO_PLACES = Decimal("0.01")
# Same bound as the money columns: 14 digits, 2 of them decimal places
MONEY_DIGITS = 14
MAX_AMOUNT = Decimal(10) ** (MONEY_DIGITS - 2)
MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


class ReportDataError(ValueError):
    """Report payload does not match the shape of its report type."""

    def __init__(self, errors):
        self.errors = errors
        super().__init__("Invalid report data")


def _money(value, path):
    if isinstance(value, bool) or value is None:
        raise ReportDataError({path: ["A valid number is required."]})
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ReportDataError({path: ["A valid number is required."]})
    if not amount.is_finite():
        raise ReportDataError({path: ["A valid number is required."]})
    if abs(amount) >= MAX_AMOUNT:
        raise ReportDataError(
            {path: [f"Ensure there are no more than {MONEY_DIGITS - 2} digits before the decimal point."]}
        )
    return amount.quantize(TWO_PLACES)


def _money_str(value):
    return str(value.quantize(TWO_PLACES))


@dataclass(frozen=True)
class ReportSection:
    """A named group of amounts whose total is the sum of its categories."""

    categories: dict = field(default_factory=dict)

    @property
    def total(self):
        return sum(self.categories.values(), ZERO)

    @classmethod
    def parse(cls, raw, path):
        if not isinstance(raw, dict):
            raise ReportDataError({path: ["Expected an object with total and categories."]})

        raw_categories = raw.get("categories", {})
        if not isinstance(raw_categories, dict):
            raise ReportDataError({f"{path}.categories": ["Expected an object."]})

        categories = {}
        errors = {}
        for name, value in raw_categories.items():
            try:
                categories[str(name)] = _money(value, f"{path}.categories.{name}")
            except ReportDataError as exc:
                errors.update(exc.errors)
        if errors:
            raise ReportDataError(errors)

        section = cls(categories=categories)
        if "total" in raw and _money(raw["total"], f"{path}.total") != section.total:
            raise ReportDataError(
                {f"{path}.total": ["Total does not match the sum of its categories."]}
            )
        return section

    def to_dict(self):
        return {
            "total": _money_str(self.total),
            "categories": {
                name: _money_str(amount) for name, amount in self.categories.items()
            },
        }


class SectionedPayload:
    """Parsing shared by payloads made of named report sections."""

    section_names = ()

    @classmethod
    def _parse_sections(cls, raw, errors):
        sections = {}
        for name in cls.section_names:
            if name not in raw:
                errors[name] = ["This field is required."]
                continue
            try:
                sections[name] = ReportSection.parse(raw[name], name)
            except ReportDataError as exc:
                errors.update(exc.errors)
        return sections

    @classmethod
    def parse(cls, raw):
        errors = {}
        sections = cls._parse_sections(raw, errors)
        if errors:
            raise ReportDataError(errors)
        return cls(**sections)


@dataclass(frozen=True)
class IncomeStatement(SectionedPayload):
    income: ReportSection
    expenses: ReportSection

    section_names = ("income", "expenses")

    @property
    def net_income(self):
        return self.income.total - self.expenses.total

    def to_dict(self):
        return {
            "income": self.income.to_dict(),
            "expenses": self.expenses.to_dict(),
            "netIncome": _money_str(self.net_income),
        }


@dataclass(frozen=True)
class BalanceSheet(SectionedPayload):
    assets: ReportSection
    liabilities: ReportSection

    section_names = ("assets", "liabilities")

    @property
    def equity(self):
        return self.assets.total - self.liabilities.total

    def to_dict(self):
        return {
            "assets": self.assets.to_dict(),
            "liabilities": self.liabilities.to_dict(),
            "equity": _money_str(self.equity),
        }


@dataclass(frozen=True)
class CashFlowPeriod:
    month: str
    inflows: Decimal
    outflows: Decimal

    @property
    def net(self):
        return self.inflows - self.outflows

    @classmethod
    def parse(cls, raw, path):
        if not isinstance(raw, dict):
            raise ReportDataError({path: ["Expected an object."]})

        month = raw.get("month")
        if not isinstance(month, str) or not MONTH_PATTERN.match(month):
            raise ReportDataError({f"{path}.month": ["Expected a month as YYYY-MM."]})

        return cls(
            month=month,
            inflows=_money(raw.get("inflows", 0), f"{path}.inflows"),
            outflows=_money(raw.get("outflows", 0), f"{path}.outflows"),
        )

    def to_dict(self):
        return {
            "month": self.month,
            "inflows": _money_str(self.inflows),
            "outflows": _money_str(self.outflows),
            "net": _money_str(self.net),
        }


@dataclass(frozen=True)
class CashFlow(SectionedPayload):
    inflows: ReportSection
    outflows: ReportSection
    periods: tuple = ()

    section_names = ("inflows", "outflows")

    @property
    def net_cash_flow(self):
        return self.inflows.total - self.outflows.total

    @classmethod
    def parse(cls, raw):
        errors = {}
        sections = cls._parse_sections(raw, errors)

        raw_periods = raw.get("periods", [])
        periods = []
        if not isinstance(raw_periods, list):
            errors["periods"] = ["Expected a list."]
        else:
            for index, raw_period in enumerate(raw_periods):
                try:
                    periods.append(CashFlowPeriod.parse(raw_period, f"periods.{index}"))
                except ReportDataError as exc:
                    errors.update(exc.errors)

        if errors:
            raise ReportDataError(errors)
        return cls(periods=tuple(periods), **sections)

    def to_dict(self):
        return {
            "inflows": self.inflows.to_dict(),
            "outflows": self.outflows.to_dict(),
            "netCashFlow": _money_str(self.net_cash_flow),
            "periods": [period.to_dict() for period in self.periods],
        }


REPORT_PAYLOADS = {
    "INCOME_STATEMENT": IncomeStatement,
    "BALANCE_SHEET": BalanceSheet,
    "CASH_FLOW": CashFlow,
}


def load_report_data(report_type, raw):
    """
    Parse raw report data into the payload class registered for its type.

    Raises:
        ReportDataError: Unknown type or data not matching the type's shape
    """
    payload_class = REPORT_PAYLOADS.get(report_type)
    if payload_class is None:
        raise ReportDataError({"type": [f"Unknown report type '{report_type}'."]})
    if not isinstance(raw, dict):
        raise ReportDataError({"data": ["Expected an object."]})
    return payload_class.parse(raw)
