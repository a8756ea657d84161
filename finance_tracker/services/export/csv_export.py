"""
CSV Export

Renders transactions as the CSV the user downloads:

    Date,Type,Category,Description,Amount
    2025-04-01,income,Salary,"Monthly Salary",5000

The description is always quoted with inner quotes doubled; the other
columns are written as-is. Rows are joined by a bare newline.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from finance_tracker.models.transaction import Transaction

CSV_HEADERS = ("Date", "Type", "Category", "Description", "Amount")


def format_amount(amount: Decimal) -> str:
    """Plain decimal text without exponent or trailing zeros: 1000, 12.5."""
    if amount == amount.to_integral_value():
        return str(amount.quantize(Decimal("1")))
    return format(amount.normalize(), "f")


def quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def transaction_row(transaction: Transaction) -> str:
    return ",".join([
        transaction.occurred_at.isoformat(),
        transaction.kind.value,
        transaction.category,
        quote(transaction.description),
        format_amount(transaction.amount),
    ])


def transactions_to_csv(transactions: Iterable[Transaction]) -> str:
    """Header row first, then one row per transaction in the given order."""
    lines = [",".join(CSV_HEADERS)]
    lines.extend(transaction_row(t) for t in transactions)
    return "\n".join(lines)


def export_filename(today: Optional[date] = None) -> str:
    return f"transactions-{(today or date.today()).isoformat()}.csv"
