"""
Data Models Package

This package contains all Pydantic models used in the Finance Tracker.
All data flowing through the system must conform to these schemas.
"""

from finance_tracker.models.transaction import (
    Category,
    MutationResult,
    Transaction,
    TransactionInput,
    TransactionKind,
)
from finance_tracker.models.views import (
    ComparisonPoint,
    DashboardData,
    FilterSpec,
    FinancialSummary,
    SeriesPoint,
    SortDirection,
    SortField,
    SortSpec,
)
from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "Category",
    "MutationResult",
    "Transaction",
    "TransactionInput",
    "TransactionKind",
    # Derived views
    "ComparisonPoint",
    "DashboardData",
    "FilterSpec",
    "FinancialSummary",
    "SeriesPoint",
    "SortDirection",
    "SortField",
    "SortSpec",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
