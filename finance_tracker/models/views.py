"""
Derived View Models

Everything in this module is COMPUTED from a transaction set and never
stored. The specs (FilterSpec, SortSpec) describe a view; the rest are the
presentation-ready results produced by the engines.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from finance_tracker.models.transaction import TransactionKind


class SortField(str, Enum):
    """Field a transaction view can be ordered by."""
    DATE = "date"
    AMOUNT = "amount"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class FilterSpec(BaseModel):
    """
    Conjunction of predicates applied to a transaction set.

    None means "any" for kind and category; an empty search term
    disables the text predicate.
    """
    model_config = ConfigDict(frozen=True)

    kind: Optional[TransactionKind] = None
    category: Optional[str] = None
    search_term: str = ""

    @property
    def is_active(self) -> bool:
        """True when at least one predicate narrows the view."""
        return (
            self.kind is not None
            or self.category is not None
            or bool(self.search_term.strip())
        )


class SortSpec(BaseModel):
    """(field, direction) pair controlling view ordering."""
    model_config = ConfigDict(frozen=True)

    field: SortField = SortField.DATE
    direction: SortDirection = SortDirection.DESCENDING

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESCENDING

    def toggle(self, field: SortField) -> "SortSpec":
        """
        Select a sort field the way a column header does.

        Re-selecting the current field flips the direction; a new field
        starts descending.
        """
        if field == self.field:
            flipped = (
                SortDirection.ASCENDING if self.descending else SortDirection.DESCENDING
            )
            return SortSpec(field=field, direction=flipped)
        return SortSpec(field=field, direction=SortDirection.DESCENDING)


class FinancialSummary(BaseModel):
    """
    Scalar aggregate over a transaction set.

    All sums are exact Decimals. net_amount is signed and may be negative.
    """
    model_config = ConfigDict(frozen=True)

    total_income: Decimal = Field(default=Decimal("0"))
    total_expenses: Decimal = Field(default=Decimal("0"))
    net_amount: Decimal = Field(default=Decimal("0"))
    transaction_count: int = Field(default=0, ge=0)
    top_expense_category: str = Field(
        default="N/A",
        description="Category with the largest expense total, or the sentinel"
    )
    average_transaction: Decimal = Field(
        default=Decimal("0"),
        description="(income + expenses) / count, 0 for an empty set"
    )


class SeriesPoint(BaseModel):
    """One bucket of a single-valued series."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Sortable bucket key, e.g. 2025-01 or 2025-01-15")
    label: str = Field(..., description="Display label")
    value: Decimal = Field(default=Decimal("0"))


class ComparisonPoint(BaseModel):
    """One bucket holding income and expense side by side."""
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    income: Decimal = Field(default=Decimal("0"))
    expense: Decimal = Field(default=Decimal("0"))


class DashboardData(BaseModel):
    """Everything the dashboard page renders, computed from one snapshot."""
    model_config = ConfigDict(frozen=True)

    summary: FinancialSummary
    category_breakdown: list[SeriesPoint] = Field(default_factory=list)
    monthly_comparison: list[ComparisonPoint] = Field(default_factory=list)
    spending_trend: list[SeriesPoint] = Field(default_factory=list)
    income_trend: list[SeriesPoint] = Field(default_factory=list)
