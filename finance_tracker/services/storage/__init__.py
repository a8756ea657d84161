"""
Storage Services Package

Provides the abstract persistence interface and its implementations.
JSON files on local disk are the default backend; the in-memory one
serves tests and throwaway sessions.
"""

from finance_tracker.services.storage.interface import (
    CorruptDataError,
    StorageError,
    TransactionStorageInterface,
)
from finance_tracker.services.storage.json_file import JsonFileStorage
from finance_tracker.services.storage.memory import InMemoryStorage

__all__ = [
    # Interface
    "TransactionStorageInterface",
    # Exceptions
    "CorruptDataError",
    "StorageError",
    # Implementations
    "InMemoryStorage",
    "JsonFileStorage",
]
