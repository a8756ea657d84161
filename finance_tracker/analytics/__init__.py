"""Analytics package: summary statistics and dashboard series."""

from finance_tracker.analytics.series import (
    category_breakdown,
    income_trend,
    monthly_comparison,
    spending_trend,
)
from finance_tracker.analytics.summary import (
    NO_CATEGORY,
    summarize,
    top_expense_category,
    totals_by_kind,
)

__all__ = [
    "NO_CATEGORY",
    "category_breakdown",
    "income_trend",
    "monthly_comparison",
    "spending_trend",
    "summarize",
    "top_expense_category",
    "totals_by_kind",
]
