"""
Category Catalogue

The list of categories offered when recording a transaction.
Transactions only reference categories by name, so removing a category
here never invalidates stored transactions.
"""

from typing import Iterable, Optional

from finance_tracker.models.transaction import (
    Category,
    MutationResult,
    TransactionKind,
)


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    # Income categories
    Category(id="1", name="Salary", kind=TransactionKind.INCOME, color="#10B981", icon="DollarSign"),
    Category(id="2", name="Freelance", kind=TransactionKind.INCOME, color="#3B82F6", icon="Briefcase"),
    Category(id="3", name="Investment", kind=TransactionKind.INCOME, color="#8B5CF6", icon="TrendingUp"),
    Category(id="4", name="Other Income", kind=TransactionKind.INCOME, color="#06B6D4", icon="Plus"),
    # Expense categories
    Category(id="5", name="Food & Dining", kind=TransactionKind.EXPENSE, color="#EF4444", icon="UtensilsCrossed"),
    Category(id="6", name="Transportation", kind=TransactionKind.EXPENSE, color="#F59E0B", icon="Car"),
    Category(id="7", name="Shopping", kind=TransactionKind.EXPENSE, color="#EC4899", icon="ShoppingBag"),
    Category(id="8", name="Entertainment", kind=TransactionKind.EXPENSE, color="#8B5CF6", icon="Film"),
    Category(id="9", name="Bills & Utilities", kind=TransactionKind.EXPENSE, color="#6B7280", icon="Receipt"),
    Category(id="10", name="Healthcare", kind=TransactionKind.EXPENSE, color="#10B981", icon="Heart"),
    Category(id="11", name="Education", kind=TransactionKind.EXPENSE, color="#3B82F6", icon="GraduationCap"),
    Category(id="12", name="Travel", kind=TransactionKind.EXPENSE, color="#06B6D4", icon="Plane"),
    Category(id="13", name="Other Expenses", kind=TransactionKind.EXPENSE, color="#6B7280", icon="MoreHorizontal"),
)


class CategoryCatalog:
    """Ordered, editable list of categories."""

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        self._categories: list[Category] = list(
            DEFAULT_CATEGORIES if categories is None else categories
        )

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    def add(self, name: str, kind: TransactionKind, color: str = "#6B7280", icon: str = "MoreHorizontal") -> Category:
        """Append a category with a fresh id."""
        category = Category(name=name, kind=kind, color=color, icon=icon)
        self._categories.append(category)
        return category

    def update(self, category: Category) -> MutationResult:
        for index, existing in enumerate(self._categories):
            if existing.id == category.id:
                self._categories[index] = category
                return MutationResult.UPDATED
        return MutationResult.NOT_FOUND

    def delete(self, category_id: str) -> MutationResult:
        remaining = [c for c in self._categories if c.id != category_id]
        if len(remaining) == len(self._categories):
            return MutationResult.NOT_FOUND
        self._categories = remaining
        return MutationResult.DELETED

    def reset(self) -> None:
        """Restore the default catalogue."""
        self._categories = list(DEFAULT_CATEGORIES)

    def find(self, name: str) -> Optional[Category]:
        for category in self._categories:
            if category.name == name:
                return category
        return None

    def names_for_kind(self, kind: Optional[TransactionKind]) -> list[str]:
        """Category names valid for a kind, in catalogue order; all names for None."""
        return [c.name for c in self._categories if kind is None or c.kind == kind]

    def __len__(self) -> int:
        return len(self._categories)
