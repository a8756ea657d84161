"""
Transaction Store

The single owned, mutable collection of transactions.

GUARANTEES:
- Insertion order is preserved; mutations never reorder records
- Ids are unique within the store
- update() replaces a record wholesale at the same position, keeping
  the stored id and recorded_at
- Every effective mutation bumps `version`

The store neither persists nor notifies. Whoever owns it reads
snapshot() after a mutation and hands it to the storage layer.
Callers in a multi-writer setting must serialize mutations themselves.
"""

from typing import Iterable, Iterator, Optional

import structlog

from finance_tracker.models.transaction import (
    MutationResult,
    Transaction,
    TransactionInput,
)

logger = structlog.get_logger(__name__)


class TransactionStore:
    """In-memory ordered collection of transaction records."""

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: list[Transaction] = []
        self._version = 0
        initial = list(transactions)
        if initial:
            self.replace_all(initial)
            self._version = 0

    @property
    def version(self) -> int:
        """Monotonic counter of effective mutations."""
        return self._version

    def snapshot(self) -> tuple[Transaction, ...]:
        """Immutable view of the current records, in store order."""
        return tuple(self._transactions)

    def get(self, transaction_id: str) -> Optional[Transaction]:
        index = self._index_of(transaction_id)
        return None if index is None else self._transactions[index]

    def add(self, data: TransactionInput) -> Transaction:
        """Create a record with fresh identity and append it."""
        transaction = Transaction.create(data)
        self._transactions.append(transaction)
        self._version += 1
        return transaction

    def update(self, transaction: Transaction) -> MutationResult:
        """
        Replace the record with the same id, in place.

        The stored recorded_at wins over the one carried by the argument.
        Returns NOT_FOUND, leaving the store untouched, for unknown ids.
        """
        index = self._index_of(transaction.id)
        if index is None:
            return MutationResult.NOT_FOUND

        current = self._transactions[index]
        self._transactions[index] = current.replaced_by(transaction)
        self._version += 1
        return MutationResult.UPDATED

    def delete(self, transaction_id: str) -> MutationResult:
        index = self._index_of(transaction_id)
        if index is None:
            return MutationResult.NOT_FOUND

        del self._transactions[index]
        self._version += 1
        return MutationResult.DELETED

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """
        Replace the whole collection, order as given.

        A repeated id keeps its first occurrence so the uniqueness
        invariant holds even for a damaged persisted list.
        """
        seen: set[str] = set()
        kept: list[Transaction] = []
        for transaction in transactions:
            if transaction.id in seen:
                logger.warning("duplicate_transaction_id_dropped", transaction_id=transaction.id)
                continue
            seen.add(transaction.id)
            kept.append(transaction)

        self._transactions = kept
        self._version += 1

    def _index_of(self, transaction_id: str) -> Optional[int]:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __contains__(self, transaction_id: object) -> bool:
        return isinstance(transaction_id, str) and self._index_of(transaction_id) is not None
