"""Tests for the transaction store and the category catalogue."""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal

from finance_tracker.models import (
    Category,
    MutationResult,
    Transaction,
    TransactionInput,
    TransactionKind,
)
from finance_tracker.store import (
    DEFAULT_CATEGORIES,
    CategoryCatalog,
    TransactionStore,
    sample_transactions,
)


def expense_input(amount: str = "12", description: str = "Lunch") -> TransactionInput:
    return TransactionInput(
        kind=TransactionKind.EXPENSE,
        amount=Decimal(amount),
        description=description,
        category="Food & Dining",
        occurred_at=date(2025, 6, 1),
    )


class TestTransactionStore:
    """Tests for add/update/delete/replace_all."""

    def test_add_appends_with_fresh_identity(self):
        store = TransactionStore()
        first = store.add(expense_input("1"))
        second = store.add(expense_input("2"))

        assert [t.id for t in store.snapshot()] == [first.id, second.id]
        assert first.id != second.id
        assert len(store) == 2
        assert first.id in store

    def test_re_adding_a_stored_transaction_gets_new_identity(self):
        """A Transaction passed to add() is treated as input only."""
        store = TransactionStore()
        first = store.add(expense_input())
        stale = first.model_copy(update={"recorded_at": datetime(2000, 1, 1, tzinfo=timezone.utc)})
        second = store.add(stale)

        assert second.id != first.id
        assert second.recorded_at != stale.recorded_at
        assert second.amount == first.amount
        assert len({t.id for t in store}) == 2

        assert store.delete(second.id) == MutationResult.DELETED
        assert store.snapshot() == (first,)

    def test_update_replaces_in_place(self):
        store = TransactionStore()
        first = store.add(expense_input("1"))
        middle = store.add(expense_input("2"))
        store.add(expense_input("3"))

        edited = middle.replaced_by(expense_input("99", description="Dinner"))
        assert store.update(edited) == MutationResult.UPDATED

        snapshot = store.snapshot()
        assert snapshot[0] == first
        assert snapshot[1].amount == Decimal("99")
        assert snapshot[1].description == "Dinner"
        assert snapshot[1].id == middle.id

    def test_update_preserves_stored_recorded_at(self):
        store = TransactionStore()
        original = store.add(expense_input())
        tampered = Transaction(
            id=original.id,
            recorded_at=datetime(2000, 1, 1, tzinfo=timezone.utc),
            **expense_input("5").model_dump(),
        )

        store.update(tampered)

        assert store.get(original.id).recorded_at == original.recorded_at

    def test_update_unknown_id_is_not_found(self):
        store = TransactionStore()
        store.add(expense_input())
        before = store.snapshot()
        version = store.version

        ghost = Transaction(id="missing", **expense_input().model_dump())
        assert store.update(ghost) == MutationResult.NOT_FOUND
        assert store.snapshot() == before
        assert store.version == version

    def test_delete(self):
        store = TransactionStore()
        keep = store.add(expense_input("1"))
        drop = store.add(expense_input("2"))

        assert store.delete(drop.id) == MutationResult.DELETED
        assert store.snapshot() == (keep,)
        assert store.delete(drop.id) == MutationResult.NOT_FOUND

    def test_replace_all_keeps_given_order(self):
        store = TransactionStore()
        store.add(expense_input())
        samples = sample_transactions()

        store.replace_all(reversed(samples))

        assert [t.id for t in store.snapshot()] == [t.id for t in reversed(samples)]

    def test_replace_all_drops_duplicate_ids(self):
        base = sample_transactions()[0]
        duplicate = base.replaced_by(expense_input("1"))
        store = TransactionStore()

        store.replace_all([base, duplicate])

        assert store.snapshot() == (base,)

    def test_version_counts_effective_mutations(self):
        store = TransactionStore()
        assert store.version == 0
        added = store.add(expense_input())
        store.update(added.replaced_by(expense_input("3")))
        store.delete("nope")
        store.delete(added.id)
        assert store.version == 3

    def test_snapshot_is_detached(self):
        store = TransactionStore()
        store.add(expense_input())
        snapshot = store.snapshot()
        store.add(expense_input())
        assert len(snapshot) == 1

    def test_initial_transactions_start_at_version_zero(self):
        store = TransactionStore(sample_transactions())
        assert len(store) == 9
        assert store.version == 0


class TestCategoryCatalog:
    """Tests for the category catalogue."""

    def test_defaults(self):
        catalog = CategoryCatalog()
        assert len(catalog) == 13
        assert catalog.names_for_kind(TransactionKind.INCOME) == [
            "Salary", "Freelance", "Investment", "Other Income",
        ]
        assert len(catalog.names_for_kind(TransactionKind.EXPENSE)) == 9
        assert len(catalog.names_for_kind(None)) == 13

    def test_add_update_delete(self):
        catalog = CategoryCatalog()
        pets = catalog.add("Pets", TransactionKind.EXPENSE)
        assert catalog.find("Pets") == pets

        renamed = pets.model_copy(update={"name": "Pet Care"})
        assert catalog.update(renamed) == MutationResult.UPDATED
        assert catalog.find("Pets") is None
        assert catalog.find("Pet Care") is not None

        assert catalog.delete(pets.id) == MutationResult.DELETED
        assert catalog.delete(pets.id) == MutationResult.NOT_FOUND

    def test_update_unknown_category(self):
        catalog = CategoryCatalog()
        stranger = Category(name="Ghost", kind=TransactionKind.EXPENSE)
        assert catalog.update(stranger) == MutationResult.NOT_FOUND

    def test_reset_restores_defaults(self):
        catalog = CategoryCatalog([])
        assert len(catalog) == 0
        catalog.reset()
        assert catalog.categories == DEFAULT_CATEGORIES


class TestSampleData:
    def test_sample_ledger(self):
        samples = sample_transactions()
        assert len(samples) == 9
        assert len({t.id for t in samples}) == 9
        assert samples[5].occurred_at == date(2025, 6, 17)
        assert samples[5].recorded_at.date() == date(2025, 8, 7)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
