"""Query package: derived, ordered transaction views."""

from finance_tracker.queries.filtering import (
    filter_and_sort,
    matches,
    sort_transactions,
    unique_categories,
)

__all__ = ["filter_and_sort", "matches", "sort_transactions", "unique_categories"]
