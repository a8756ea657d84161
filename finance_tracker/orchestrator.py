"""
Main Orchestrator for Finance Tracker

This module ties the components together for the two things the app does:
1. Ledger editing (add / edit / delete -> persist -> audit)
2. Views (filtered list, dashboard summary and series, CSV export)

DESIGN DECISION: The orchestrator owns the only mutable state.
- The engines never see the store, only snapshots of it
- Persistence observes the store after each effective mutation
- A persistence failure is audited but never loses the in-memory state
"""

from datetime import date
from typing import Optional

from finance_tracker.analytics import (
    category_breakdown,
    income_trend,
    monthly_comparison,
    spending_trend,
    summarize,
)
from finance_tracker.audit import AuditLogger
from finance_tracker.config import AnalyticsSettings, get_settings
from finance_tracker.models.audit import AuditEventType
from finance_tracker.models.transaction import (
    Category,
    MutationResult,
    Transaction,
    TransactionInput,
    TransactionKind,
)
from finance_tracker.models.views import (
    DashboardData,
    FilterSpec,
    FinancialSummary,
    SortSpec,
)
from finance_tracker.queries import filter_and_sort, unique_categories
from finance_tracker.services.export import export_filename, transactions_to_csv
from finance_tracker.services.storage import (
    InMemoryStorage,
    JsonFileStorage,
    StorageError,
    TransactionStorageInterface,
)
from finance_tracker.store import CategoryCatalog, TransactionStore, sample_transactions


class FinanceTracker:
    """
    Facade over the store, the category catalogue and the engines.

    Single-writer: one FinanceTracker owns its store. Callers sharing it
    across threads must serialize the mutating methods.
    """

    def __init__(
        self,
        storage: Optional[TransactionStorageInterface] = None,
        audit_logger: Optional[AuditLogger] = None,
        analytics: Optional[AnalyticsSettings] = None,
        seed_sample_data: bool = False,
    ):
        self._storage = storage or InMemoryStorage()
        self._audit_logger = audit_logger or AuditLogger()
        self._analytics = analytics or AnalyticsSettings()
        self._seed_sample_data = seed_sample_data
        self._store = TransactionStore()
        self._catalog = CategoryCatalog()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._store.snapshot()

    @property
    def version(self) -> int:
        return self._store.version

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._catalog.categories

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    def load(self) -> int:
        """
        Load persisted state into the store and catalogue.

        Falls back to the sample ledger when nothing is stored and
        seeding is enabled. Returns the number of transactions loaded.
        """
        try:
            stored = self._storage.load_transactions()
            stored_categories = self._storage.load_categories()
        except StorageError as e:
            self._audit_logger.log_persistence_failed("load", str(e))
            stored, stored_categories = [], []

        if stored:
            self._store.replace_all(stored)
            self._audit_logger.log_transactions_loaded(len(self._store), "storage")
        elif self._seed_sample_data:
            self._store.replace_all(sample_transactions())
            self._audit_logger.log_transactions_loaded(len(self._store), "sample data")

        if stored_categories:
            self._catalog = CategoryCatalog(stored_categories)

        return len(self._store)

    # -------------------------------------------------------------------------
    # Ledger mutations
    # -------------------------------------------------------------------------

    def add_transaction(self, data: TransactionInput) -> Transaction:
        transaction = self._store.add(data)
        self._audit_logger.log_transaction_added(transaction)
        self._persist_transactions()
        return transaction

    def update_transaction(self, transaction: Transaction) -> MutationResult:
        """Replace a transaction wholesale; NOT_FOUND signals a stale edit."""
        result = self._store.update(transaction)
        if result == MutationResult.NOT_FOUND:
            self._audit_logger.log_target_missing("update", transaction.id)
            return result

        self._audit_logger.log_transaction_updated(self._store.get(transaction.id))
        self._persist_transactions()
        return result

    def edit_transaction(self, transaction_id: str, data: TransactionInput) -> MutationResult:
        """Apply form input to an existing transaction."""
        return self.update_transaction(
            Transaction(id=transaction_id, **data.model_dump())
        )

    def delete_transaction(self, transaction_id: str) -> MutationResult:
        result = self._store.delete(transaction_id)
        if result == MutationResult.NOT_FOUND:
            self._audit_logger.log_target_missing("delete", transaction_id)
            return result

        self._audit_logger.log_transaction_deleted(transaction_id)
        self._persist_transactions()
        return result

    # -------------------------------------------------------------------------
    # Category catalogue
    # -------------------------------------------------------------------------

    def add_category(self, name: str, kind: TransactionKind, color: str = "#6B7280", icon: str = "MoreHorizontal") -> Category:
        category = self._catalog.add(name, kind, color=color, icon=icon)
        self._audit_logger.log_category_changed(AuditEventType.CATEGORY_ADDED, category)
        self._persist_categories()
        return category

    def update_category(self, category: Category) -> MutationResult:
        result = self._catalog.update(category)
        if result == MutationResult.UPDATED:
            self._audit_logger.log_category_changed(AuditEventType.CATEGORY_UPDATED, category)
            self._persist_categories()
        return result

    def delete_category(self, category_id: str) -> MutationResult:
        """Remove a category; transactions keep referencing it by name."""
        existing = next((c for c in self._catalog.categories if c.id == category_id), None)
        result = self._catalog.delete(category_id)
        if existing is not None:
            self._audit_logger.log_category_changed(AuditEventType.CATEGORY_DELETED, existing)
            self._persist_categories()
        return result

    def reset_categories(self) -> None:
        self._catalog.reset()
        self._audit_logger.log_categories_reset(len(self._catalog))
        self._persist_categories()

    def category_choices(self, kind: Optional[TransactionKind] = None) -> list[str]:
        """Catalogue names valid for a kind (form and filter dropdowns)."""
        return self._catalog.names_for_kind(kind)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def transactions_view(
        self,
        filters: FilterSpec = FilterSpec(),
        sort: SortSpec = SortSpec(),
    ) -> list[Transaction]:
        return filter_and_sort(self._store.snapshot(), filters, sort)

    def categories_in_use(self) -> list[str]:
        return unique_categories(self._store.snapshot())

    def summary(self, transactions: Optional[list[Transaction]] = None) -> FinancialSummary:
        """Summary of the whole ledger, or of the given subset."""
        if transactions is None:
            transactions = list(self._store.snapshot())
        return summarize(transactions, self._analytics.no_category_label)

    def dashboard(self, today: Optional[date] = None, year: Optional[int] = None) -> DashboardData:
        """Summary and all four series, computed from one snapshot."""
        today = today or date.today()
        snapshot = self._store.snapshot()
        return DashboardData(
            summary=summarize(snapshot, self._analytics.no_category_label),
            category_breakdown=category_breakdown(snapshot),
            monthly_comparison=monthly_comparison(snapshot, year=year, today=today),
            spending_trend=spending_trend(snapshot, days=self._analytics.spending_trend_days, today=today),
            income_trend=income_trend(snapshot, months=self._analytics.income_trend_months, today=today),
        )

    def render_csv(self, today: Optional[date] = None) -> tuple[str, str]:
        """Render the whole ledger as CSV without recording an export."""
        return export_filename(today), transactions_to_csv(self._store.snapshot())

    def record_csv_export(self, filename: str, row_count: int) -> None:
        """Audit a CSV export the user actually took."""
        self._audit_logger.log_csv_exported(row_count, filename)

    def export_csv(self, today: Optional[date] = None) -> tuple[str, str]:
        """Render the whole ledger as CSV and audit it. Returns (filename, content)."""
        filename, content = self.render_csv(today)
        self.record_csv_export(filename, len(self._store))
        return filename, content

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _persist_transactions(self) -> None:
        try:
            self._storage.save_transactions(list(self._store.snapshot()))
        except StorageError as e:
            self._audit_logger.log_persistence_failed(
                "save_transactions", str(e), {"version": self._store.version}
            )

    def _persist_categories(self) -> None:
        try:
            self._storage.save_categories(list(self._catalog.categories))
        except StorageError as e:
            self._audit_logger.log_persistence_failed("save_categories", str(e))


def create_app_components(use_storage: bool = True) -> FinanceTracker:
    """
    Factory function to create a loaded FinanceTracker.

    Args:
        use_storage: Whether to persist to the configured JSON files.
                    Set to False for an in-memory session.
    """
    settings = get_settings()
    storage: TransactionStorageInterface = (
        JsonFileStorage(settings.storage) if use_storage else InMemoryStorage()
    )
    tracker = FinanceTracker(
        storage=storage,
        audit_logger=AuditLogger(),
        analytics=settings.analytics,
        seed_sample_data=settings.app.seed_sample_data,
    )
    tracker.load()
    return tracker
