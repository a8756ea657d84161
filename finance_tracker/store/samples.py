"""Sample ledger shown on first start, before anything is persisted."""

from datetime import date, datetime, timezone
from decimal import Decimal

from finance_tracker.models.transaction import Transaction, TransactionKind


def _sample(
    index: int,
    kind: TransactionKind,
    amount: str,
    description: str,
    category: str,
    occurred_at: date,
    recorded_at: date,
) -> Transaction:
    return Transaction(
        id=f"sample-{index}",
        kind=kind,
        amount=Decimal(amount),
        description=description,
        category=category,
        occurred_at=occurred_at,
        recorded_at=datetime(recorded_at.year, recorded_at.month, recorded_at.day, tzinfo=timezone.utc),
    )


def sample_transactions() -> list[Transaction]:
    """Nine transactions spread over April to August 2025."""
    income, expense = TransactionKind.INCOME, TransactionKind.EXPENSE
    return [
        _sample(1, income, "5000", "Monthly Salary", "Salary", date(2025, 4, 1), date(2025, 4, 1)),
        _sample(2, expense, "1200", "Rent Payment", "Bills & Utilities", date(2025, 4, 21), date(2025, 4, 21)),
        _sample(3, income, "5575", "salary", "Salary", date(2025, 5, 2), date(2025, 5, 2)),
        _sample(4, expense, "320", "Electric Bill", "Bills & Utilities", date(2025, 5, 25), date(2025, 5, 25)),
        _sample(5, expense, "435", "Coffee & Lunch", "Food & Dining", date(2025, 6, 5), date(2025, 6, 5)),
        _sample(6, income, "6550", "other income", "Other Income", date(2025, 6, 17), date(2025, 8, 7)),
        _sample(7, income, "2350", "Stock Dividend", "Investment", date(2025, 7, 18), date(2025, 7, 18)),
        _sample(8, expense, "335", "movie", "Entertainment", date(2025, 7, 25), date(2025, 7, 25)),
        _sample(9, expense, "3375", "Travel", "Travel", date(2025, 8, 25), date(2025, 8, 25)),
    ]
