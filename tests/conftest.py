"""Shared fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.models import Transaction, TransactionKind


@pytest.fixture
def make_transaction():
    """Factory for transactions with readable defaults and stable ids."""
    counter = {"n": 0}

    def _make(
        kind: TransactionKind = TransactionKind.EXPENSE,
        amount="10",
        occurred_at: date = date(2025, 1, 15),
        category: str = "Food & Dining",
        description: str = "",
        id: str = None,
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=id or f"t{counter['n']}",
            kind=kind,
            amount=Decimal(str(amount)),
            description=description,
            category=category,
            occurred_at=occurred_at,
        )

    return _make


@pytest.fixture
def early_2025_ledger(make_transaction):
    """One income and two expenses across January and February 2025."""
    return [
        make_transaction(TransactionKind.INCOME, 1000, date(2025, 1, 15), category="Salary"),
        make_transaction(TransactionKind.EXPENSE, 300, date(2025, 1, 20), category="Bills & Utilities"),
        make_transaction(TransactionKind.EXPENSE, 200, date(2025, 2, 1), category="Bills & Utilities"),
    ]
