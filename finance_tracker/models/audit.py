"""
Audit Models for Finance Tracker

Every mutation of the user's ledger is logged for audit purposes.
This provides:
1. Traceability of every add, edit and delete
2. Debugging information when persistence fails
3. Visibility into stale edits (update of a record that no longer exists)

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from finance_tracker.models.transaction import Category, Transaction, utc_now


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Ledger mutations
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_UPDATED = "transaction_updated"
    TRANSACTION_DELETED = "transaction_deleted"
    UPDATE_TARGET_MISSING = "update_target_missing"
    DELETE_TARGET_MISSING = "delete_target_missing"
    TRANSACTIONS_LOADED = "transactions_loaded"

    # Category catalogue
    CATEGORY_ADDED = "category_added"
    CATEGORY_UPDATED = "category_updated"
    CATEGORY_DELETED = "category_deleted"
    CATEGORIES_RESET = "categories_reset"

    # Persistence and export
    PERSISTENCE_FAILED = "persistence_failed"
    CSV_EXPORTED = "csv_exported"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # What entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'category')"
    )
    entity_id: Optional[str] = None

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added(transaction)
        event = AuditEventBuilder.persistence_failed("save", str(exc))
    """

    @staticmethod
    def transaction_added(transaction: Transaction) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            entity_id=transaction.id,
            description=f"{transaction.kind.value.title()} added: {transaction.category}",
            details={
                "kind": transaction.kind.value,
                "amount": str(transaction.amount),
                "occurred_at": transaction.occurred_at.isoformat(),
            },
        )

    @staticmethod
    def transaction_updated(transaction: Transaction) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_UPDATED,
            entity_type="transaction",
            entity_id=transaction.id,
            description=f"Transaction updated: {transaction.category}",
            details={
                "kind": transaction.kind.value,
                "amount": str(transaction.amount),
                "occurred_at": transaction.occurred_at.isoformat(),
            },
        )

    @staticmethod
    def transaction_deleted(transaction_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_DELETED,
            entity_type="transaction",
            entity_id=transaction_id,
            description="Transaction deleted",
        )

    @staticmethod
    def target_missing(operation: str, transaction_id: str) -> AuditEvent:
        """A mutation addressed an id the store does not hold (stale edit)."""
        event_type = (
            AuditEventType.UPDATE_TARGET_MISSING
            if operation == "update"
            else AuditEventType.DELETE_TARGET_MISSING
        )
        return AuditEvent(
            event_type=event_type,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            entity_id=transaction_id,
            description=f"Cannot {operation}: transaction not found",
        )

    @staticmethod
    def transactions_loaded(count: int, source: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTIONS_LOADED,
            entity_type="ledger",
            description=f"Loaded {count} transactions from {source}",
            details={"count": count, "source": source},
        )

    @staticmethod
    def category_changed(event_type: AuditEventType, category: Category) -> AuditEvent:
        return AuditEvent(
            event_type=event_type,
            entity_type="category",
            entity_id=category.id,
            description=f"Category {event_type.value.split('_')[-1]}: {category.name}",
            details={"name": category.name, "kind": category.kind.value},
        )

    @staticmethod
    def categories_reset(count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORIES_RESET,
            entity_type="category",
            description=f"Category catalogue reset to {count} defaults",
            details={"count": count},
        )

    @staticmethod
    def persistence_failed(operation: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PERSISTENCE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="storage",
            description=f"Persistence failed during {operation}",
            details={"operation": operation},
            error_message=error_message,
        )

    @staticmethod
    def csv_exported(row_count: int, filename: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CSV_EXPORTED,
            entity_type="export",
            description=f"Exported {row_count} transactions to {filename}",
            details={"row_count": row_count, "filename": filename},
        )
