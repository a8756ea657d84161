"""
Aggregation Engine

Scalar statistics over a transaction set.

All sums use Decimal, so total_income - total_expenses == net_amount
holds exactly. No rounding happens here; that belongs to presentation.
"""

from decimal import Decimal
from typing import Iterable

from finance_tracker.models.transaction import Transaction, TransactionKind
from finance_tracker.models.views import FinancialSummary

NO_CATEGORY = "N/A"


def totals_by_kind(transactions: Iterable[Transaction]) -> dict[TransactionKind, Decimal]:
    """Summed amount per kind; both kinds are always present."""
    totals = {TransactionKind.INCOME: Decimal("0"), TransactionKind.EXPENSE: Decimal("0")}
    for t in transactions:
        totals[t.kind] += t.amount
    return totals


def expense_totals_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Summed expense per category, keyed in first-seen order."""
    totals: dict[str, Decimal] = {}
    for t in transactions:
        if t.is_expense:
            totals[t.category] = totals.get(t.category, Decimal("0")) + t.amount
    return totals


def top_expense_category(
    transactions: Iterable[Transaction],
    no_category_label: str = NO_CATEGORY,
) -> str:
    """
    Category with the largest summed expense.

    Ties go to the category encountered first in the input. Returns
    `no_category_label` when there is no expense at all.
    """
    top_name, top_total = no_category_label, None
    for name, total in expense_totals_by_category(transactions).items():
        if top_total is None or total > top_total:
            top_name, top_total = name, total
    return top_name


def summarize(
    transactions: Iterable[Transaction],
    no_category_label: str = NO_CATEGORY,
) -> FinancialSummary:
    """Compute the financial summary of a transaction set."""
    transactions = list(transactions)
    totals = totals_by_kind(transactions)
    income = totals[TransactionKind.INCOME]
    expenses = totals[TransactionKind.EXPENSE]
    count = len(transactions)

    return FinancialSummary(
        total_income=income,
        total_expenses=expenses,
        net_amount=income - expenses,
        transaction_count=count,
        top_expense_category=top_expense_category(transactions, no_category_label),
        average_transaction=(income + expenses) / count if count else Decimal("0"),
    )
