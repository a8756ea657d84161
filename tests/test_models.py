"""
Tests for Finance Tracker

Test strategy:
1. Unit tests for models, store and engines
2. Integration tests for the tracker facade (in-memory storage)
3. No real user data directory touched in tests (tmp_path only)
"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal

from pydantic import ValidationError

from finance_tracker.models import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    Category,
    FilterSpec,
    SortDirection,
    SortField,
    SortSpec,
    Transaction,
    TransactionInput,
    TransactionKind,
)


def make_input(**overrides) -> TransactionInput:
    fields = dict(
        kind=TransactionKind.EXPENSE,
        amount=Decimal("42.50"),
        description="Groceries",
        category="Food & Dining",
        occurred_at=date(2025, 3, 14),
    )
    fields.update(overrides)
    return TransactionInput(**fields)


class TestTransactionModels:
    """Tests for transaction-related Pydantic models."""

    def test_transaction_input_creation(self):
        """Test TransactionInput model creation."""
        data = make_input()
        assert data.kind == TransactionKind.EXPENSE
        assert data.amount == Decimal("42.50")
        assert data.occurred_at == date(2025, 3, 14)

    def test_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValueError):
            make_input(amount=Decimal("-1"))

    def test_zero_amount_is_allowed(self):
        assert make_input(amount=Decimal("0")).amount == Decimal("0")

    def test_datetime_is_truncated_to_calendar_date(self):
        """Time of day never shifts the business date."""
        data = make_input(occurred_at=datetime(2025, 1, 31, 23, 59, 59))
        assert data.occurred_at == date(2025, 1, 31)

    def test_iso_timestamp_is_truncated_to_its_own_date(self):
        data = make_input(occurred_at="2025-04-01T23:30:00.000Z")
        assert data.occurred_at == date(2025, 4, 1)

    def test_plain_iso_date_string(self):
        assert make_input(occurred_at="2025-02-28").occurred_at == date(2025, 2, 28)

    def test_create_assigns_identity(self):
        """Test that create() gives a fresh id and recorded_at."""
        first = Transaction.create(make_input())
        second = Transaction.create(make_input())
        assert first.id and second.id
        assert first.id != second.id
        assert first.recorded_at.tzinfo is not None

    def test_transaction_is_frozen(self):
        transaction = Transaction.create(make_input())
        with pytest.raises(ValidationError):
            transaction.amount = Decimal("1")

    def test_replaced_by_keeps_identity(self):
        """Test wholesale replacement keeps id and recorded_at."""
        original = Transaction.create(make_input())
        replacement = original.replaced_by(
            make_input(amount=Decimal("10"), kind=TransactionKind.INCOME, category="Salary")
        )
        assert replacement.id == original.id
        assert replacement.recorded_at == original.recorded_at
        assert replacement.amount == Decimal("10")
        assert replacement.kind == TransactionKind.INCOME

    def test_accepts_legacy_field_names(self):
        """Records persisted as type/date/createdAt still load."""
        transaction = Transaction.model_validate({
            "id": "sample-1",
            "type": "income",
            "amount": 5000,
            "description": "Monthly Salary",
            "category": "Salary",
            "date": "2025-04-01T00:00:00.000Z",
            "createdAt": "2025-04-01T00:00:00.000Z",
        })
        assert transaction.kind == TransactionKind.INCOME
        assert transaction.occurred_at == date(2025, 4, 1)
        assert transaction.recorded_at == datetime(2025, 4, 1, tzinfo=timezone.utc)
        assert transaction.amount == Decimal("5000")

    def test_json_amount_is_string(self):
        transaction = Transaction.create(make_input())
        assert transaction.model_dump(mode="json")["amount"] == "42.50"

    def test_kind_helpers(self):
        income = Transaction.create(make_input(kind=TransactionKind.INCOME))
        assert income.is_income is True
        assert income.is_expense is False


class TestCategoryModel:
    """Tests for the Category model."""

    def test_category_requires_name(self):
        with pytest.raises(ValueError):
            Category(name="", kind=TransactionKind.EXPENSE)

    def test_category_accepts_legacy_type(self):
        category = Category.model_validate(
            {"id": "1", "name": "Salary", "type": "income", "color": "#10B981", "icon": "DollarSign"}
        )
        assert category.kind == TransactionKind.INCOME

    def test_category_strips_whitespace(self):
        assert Category(name="  Travel  ", kind=TransactionKind.EXPENSE).name == "Travel"


class TestViewSpecs:
    """Tests for FilterSpec and SortSpec."""

    def test_default_filter_is_inactive(self):
        assert FilterSpec().is_active is False

    def test_whitespace_search_is_inactive(self):
        assert FilterSpec(search_term="   ").is_active is False

    @pytest.mark.parametrize("spec", [
        FilterSpec(kind=TransactionKind.INCOME),
        FilterSpec(category="Travel"),
        FilterSpec(search_term="rent"),
    ])
    def test_any_predicate_makes_filter_active(self, spec):
        assert spec.is_active is True

    def test_default_sort_is_date_descending(self):
        sort = SortSpec()
        assert sort.field == SortField.DATE
        assert sort.direction == SortDirection.DESCENDING

    def test_toggle_same_field_flips_direction(self):
        sort = SortSpec().toggle(SortField.DATE)
        assert sort.direction == SortDirection.ASCENDING
        assert sort.toggle(SortField.DATE).direction == SortDirection.DESCENDING

    def test_toggle_new_field_starts_descending(self):
        sort = SortSpec(field=SortField.DATE, direction=SortDirection.ASCENDING)
        toggled = sort.toggle(SortField.AMOUNT)
        assert toggled.field == SortField.AMOUNT
        assert toggled.direction == SortDirection.DESCENDING


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        event = AuditEvent(
            event_type=AuditEventType.TRANSACTION_DELETED,
            description="Transaction deleted",
        )
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        transaction = Transaction.create(make_input())
        log_dict = AuditEventBuilder.transaction_added(transaction).to_log_dict()
        assert log_dict["event_type"] == "transaction_added"
        assert log_dict["entity_id"] == transaction.id
        assert log_dict["details"]["amount"] == "42.50"
        assert log_dict["details"]["occurred_at"] == "2025-03-14"

    def test_target_missing_is_warning(self):
        event = AuditEventBuilder.target_missing("update", "gone")
        assert event.event_type == AuditEventType.UPDATE_TARGET_MISSING
        assert event.severity == AuditSeverity.WARNING

        event = AuditEventBuilder.target_missing("delete", "gone")
        assert event.event_type == AuditEventType.DELETE_TARGET_MISSING

    def test_persistence_failed_is_error(self):
        event = AuditEventBuilder.persistence_failed("save_transactions", "disk full")
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "disk full"

    def test_category_event_description(self):
        category = Category(name="Pets", kind=TransactionKind.EXPENSE)
        event = AuditEventBuilder.category_changed(AuditEventType.CATEGORY_ADDED, category)
        assert event.description == "Category added: Pets"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
