"""
JSON File Storage Implementation

DESIGN DECISION: Local JSON files are the storage backend because:
1. A personal ledger is small enough to rewrite whole on every change
2. No database setup required
3. Users can inspect or back up the files directly

TRADEOFFS:
- Whole-file rewrites (fine for personal use)
- Single writer only; concurrent processes would overwrite each other

Writes go to a temporary file that is then renamed over the target, so a
crash mid-write never leaves a half-written ledger behind.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from finance_tracker.config import StorageSettings, get_settings
from finance_tracker.models.transaction import Category, Transaction
from finance_tracker.services.storage.interface import (
    CorruptDataError,
    StorageError,
    TransactionStorageInterface,
)

T = TypeVar("T")

TRANSACTIONS_ADAPTER = TypeAdapter(list[Transaction])
CATEGORIES_ADAPTER = TypeAdapter(list[Category])

logger = structlog.get_logger(__name__)

# Transient filesystem errors (locked file, flaky network drive) get retried
_io_retry = retry(
    retry=retry_if_exception_type(OSError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
    reraise=True,
)


class JsonFileStorage(TransactionStorageInterface):
    """
    Stores transactions and categories as two JSON arrays on disk.

    Amounts are written as strings so Decimals round-trip exactly.
    """

    def __init__(self, settings: Optional[StorageSettings] = None):
        self._settings = settings or get_settings().storage

    @property
    def transactions_path(self) -> Path:
        return self._settings.transactions_path

    @property
    def categories_path(self) -> Path:
        return self._settings.categories_path

    def load_transactions(self) -> list[Transaction]:
        return self._load(self.transactions_path, TRANSACTIONS_ADAPTER)

    def save_transactions(self, transactions: list[Transaction]) -> None:
        self._save(self.transactions_path, TRANSACTIONS_ADAPTER.dump_json(transactions, indent=2))
        logger.debug("transactions_saved", path=str(self.transactions_path), count=len(transactions))

    def load_categories(self) -> list[Category]:
        return self._load(self.categories_path, CATEGORIES_ADAPTER)

    def save_categories(self, categories: list[Category]) -> None:
        self._save(self.categories_path, CATEGORIES_ADAPTER.dump_json(categories, indent=2))

    def clear(self) -> None:
        for path in (self.transactions_path, self.categories_path):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise StorageError(f"Failed to remove {path}: {e}") from e

    def _load(self, path: Path, adapter: TypeAdapter[list[T]]) -> list[T]:
        if not path.exists():
            return []

        try:
            raw = self._read_bytes(path)
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

        if not raw.strip():
            return []

        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            raise CorruptDataError(f"Unreadable data in {path}: {e}") from e

    def _save(self, path: Path, payload: bytes) -> None:
        try:
            self._write_atomic(path, payload)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    @_io_retry
    def _read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    @_io_retry
    def _write_atomic(self, path: Path, payload: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
