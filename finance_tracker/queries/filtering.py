"""
Filter & Sort Engine

DESIGN DECISION: Views are DERIVED, never stored.
filter_and_sort() takes a snapshot and returns a new list; the input
sequence is never mutated.

GUARANTEES:
- Every returned transaction satisfies every active predicate
- Every input transaction satisfying them appears exactly once
- Equal sort keys keep their input order, in both directions
"""

from typing import Iterable, Sequence

from finance_tracker.models.transaction import Transaction
from finance_tracker.models.views import FilterSpec, SortField, SortSpec


def matches(transaction: Transaction, spec: FilterSpec) -> bool:
    """
    AND-combination of the kind, category and search predicates.

    The search term matches case-insensitively as a substring of the
    description or the category name.
    """
    if spec.kind is not None and transaction.kind != spec.kind:
        return False

    if spec.category is not None and transaction.category != spec.category:
        return False

    term = spec.search_term.strip().casefold()
    if term and not (
        term in transaction.description.casefold()
        or term in transaction.category.casefold()
    ):
        return False

    return True


def sort_transactions(
    transactions: Iterable[Transaction],
    sort: SortSpec,
) -> list[Transaction]:
    """Stable sort on occurred_at or amount."""
    if sort.field == SortField.AMOUNT:
        key = lambda t: t.amount
    else:
        key = lambda t: t.occurred_at
    # sorted() stays stable with reverse=True
    return sorted(transactions, key=key, reverse=sort.descending)


def filter_and_sort(
    transactions: Sequence[Transaction],
    filters: FilterSpec = FilterSpec(),
    sort: SortSpec = SortSpec(),
) -> list[Transaction]:
    """Derive the ordered view of `transactions` for the given specs."""
    return sort_transactions(
        (t for t in transactions if matches(t, filters)),
        sort,
    )


def unique_categories(transactions: Iterable[Transaction]) -> list[str]:
    """Distinct category names in use, sorted for a filter dropdown."""
    return sorted({t.category for t in transactions})
