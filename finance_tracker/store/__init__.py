"""In-memory ledger state: transactions and categories."""

from finance_tracker.store.categories import DEFAULT_CATEGORIES, CategoryCatalog
from finance_tracker.store.samples import sample_transactions
from finance_tracker.store.transaction_store import TransactionStore

__all__ = [
    "CategoryCatalog",
    "DEFAULT_CATEGORIES",
    "TransactionStore",
    "sample_transactions",
]
