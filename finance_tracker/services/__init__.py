"""Services package: persistence and export collaborators."""

from finance_tracker.services.export import export_filename, transactions_to_csv
from finance_tracker.services.storage import (
    CorruptDataError,
    InMemoryStorage,
    JsonFileStorage,
    StorageError,
    TransactionStorageInterface,
)

__all__ = [
    # Export
    "export_filename",
    "transactions_to_csv",
    # Storage
    "CorruptDataError",
    "InMemoryStorage",
    "JsonFileStorage",
    "StorageError",
    "TransactionStorageInterface",
]
