"""
Core Data Models for Finance Tracker

These models define the schemas for every record flowing through the system.
They are designed to:
1. Enforce type safety at runtime
2. Reject impossible values (negative amounts) at construction
3. Be serializable for storage and logging

DESIGN DECISION: A Transaction is frozen. An edit never mutates a record in
place; it builds a new record that keeps the original id and recorded_at.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """
    Direction of a transaction.

    The kind is the ONLY source of sign: amounts are always magnitudes.
    """
    INCOME = "income"
    EXPENSE = "expense"


class MutationResult(str, Enum):
    """Outcome of a store or catalogue mutation addressed by id."""
    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"


def new_id() -> str:
    """Generate a fresh opaque identifier."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def coerce_calendar_date(value: Any) -> Any:
    """
    Normalize a business date to a pure calendar date.

    Datetimes and ISO timestamps are truncated to their own calendar date,
    so time-of-day and offset never move a transaction into another bucket.
    Anything else is left for pydantic to validate.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and len(value) > 10 and value[10] in ("T", " "):
        return date.fromisoformat(value[:10])
    return value


# =============================================================================
# TRANSACTION MODELS
# =============================================================================

class TransactionInput(BaseModel):
    """
    Caller-supplied fields for a new transaction.

    The store assigns id and recorded_at; everything else comes from here.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    kind: TransactionKind
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Non-negative magnitude in the currency unit"
    )
    description: str = Field(
        default="",
        max_length=500,
        description="Free-text label"
    )
    category: str = Field(
        ...,
        max_length=100,
        description="Category name (by convention, not enforced)"
    )
    occurred_at: date = Field(
        ...,
        description="Business date the transaction is attributed to"
    )

    @field_validator("occurred_at", mode="before")
    @classmethod
    def normalize_occurred_at(cls, v: Any) -> Any:
        return coerce_calendar_date(v)


class Transaction(TransactionInput):
    """
    A recorded income or expense.

    id and recorded_at are assigned once by the store and survive edits.
    recorded_at is audit data only; bucketing always uses occurred_at.
    """

    id: str = Field(
        default_factory=new_id,
        min_length=1,
        description="Unique opaque identifier"
    )
    recorded_at: datetime = Field(
        default_factory=utc_now,
        description="When the record was created"
    )

    @model_validator(mode="before")
    @classmethod
    def accept_legacy_field_names(cls, data: Any) -> Any:
        """Accept records persisted with type/date/createdAt field names."""
        if isinstance(data, dict):
            aliases = {"type": "kind", "date": "occurred_at", "createdAt": "recorded_at"}
            if any(legacy in data for legacy in aliases):
                data = dict(data)
                for legacy, current in aliases.items():
                    if legacy in data and current not in data:
                        data[current] = data.pop(legacy)
        return data

    @classmethod
    def create(cls, data: TransactionInput) -> "Transaction":
        """Build a brand new transaction with fresh identity."""
        return cls(**data.model_dump(include=set(TransactionInput.model_fields)))

    def replaced_by(self, data: TransactionInput) -> "Transaction":
        """Return the wholesale replacement of this record, keeping identity."""
        return Transaction(
            id=self.id,
            recorded_at=self.recorded_at,
            **data.model_dump(include=set(TransactionInput.model_fields)),
        )

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionKind.EXPENSE

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, amount: Decimal) -> str:
        return str(amount)


# =============================================================================
# CATEGORY MODEL
# =============================================================================

class Category(BaseModel):
    """
    A named category the user can assign to transactions.

    The engines only read name and kind. color and icon are display tokens.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1, max_length=100)
    kind: TransactionKind
    color: str = Field(default="#6B7280", description="Display color token")
    icon: str = Field(default="MoreHorizontal", description="Display icon token")

    @model_validator(mode="before")
    @classmethod
    def accept_legacy_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and "type" in data and "kind" not in data:
            data = dict(data)
            data["kind"] = data.pop("type")
        return data

