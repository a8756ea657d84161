"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for persistence.
This allows us to:
1. Keep the engines free of any I/O
2. Use in-memory storage for testing
3. Swap the JSON files for something else later

The interface is intentionally tiny: the ledger is loaded once at
startup and written back whole after every mutation.
"""

from abc import ABC, abstractmethod

from finance_tracker.models.transaction import Category, Transaction


class TransactionStorageInterface(ABC):
    """
    Abstract interface for ledger persistence.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def load_transactions(self) -> list[Transaction]:
        """
        Load the persisted transaction list.

        Returns:
            The stored transactions in stored order, or [] when nothing
            has been persisted yet

        Raises:
            CorruptDataError: If stored data cannot be parsed
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def save_transactions(self, transactions: list[Transaction]) -> None:
        """
        Persist the full transaction list, replacing what was stored.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def load_categories(self) -> list[Category]:
        """
        Load the persisted category catalogue.

        Returns:
            The stored categories, or [] when none were persisted
        """
        pass

    @abstractmethod
    def save_categories(self, categories: list[Category]) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all persisted data."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class CorruptDataError(StorageError):
    """Persisted data exists but cannot be parsed."""
    pass
