"""In-memory storage, for tests and ephemeral sessions."""

from typing import Optional

from finance_tracker.models.transaction import Category, Transaction
from finance_tracker.services.storage.interface import TransactionStorageInterface


class InMemoryStorage(TransactionStorageInterface):
    """Keeps the last saved lists; counts saves so callers can assert on them."""

    def __init__(
        self,
        transactions: Optional[list[Transaction]] = None,
        categories: Optional[list[Category]] = None,
    ):
        self._transactions = list(transactions or [])
        self._categories = list(categories or [])
        self.save_count = 0

    def load_transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def save_transactions(self, transactions: list[Transaction]) -> None:
        self._transactions = list(transactions)
        self.save_count += 1

    def load_categories(self) -> list[Category]:
        return list(self._categories)

    def save_categories(self, categories: list[Category]) -> None:
        self._categories = list(categories)

    def clear(self) -> None:
        self._transactions = []
        self._categories = []
