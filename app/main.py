"""
Streamlit Frontend for Finance Tracker

Two pages:
1. Dashboard - summary cards, category pie, monthly bars, trend lines
2. Transactions - filter, sort, add/edit/delete, CSV download

DESIGN PRINCIPLES:
1. The UI only renders what the FinanceTracker computes
2. Form input is validated here, before it reaches the ledger
3. Clear feedback for every mutation
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

import pandas as pd
import streamlit as st

from finance_tracker.audit import configure_logging
from finance_tracker.config import get_settings
from finance_tracker.models import (
    FilterSpec,
    MutationResult,
    SortField,
    SortSpec,
    Transaction,
    TransactionInput,
    TransactionKind,
)
from finance_tracker.orchestrator import FinanceTracker, create_app_components


st.set_page_config(
    page_title="Finance Tracker",
    page_icon="💵",
    layout="wide",
    initial_sidebar_state="expanded",
)

KIND_LABELS = {"All": None, "Income": TransactionKind.INCOME, "Expense": TransactionKind.EXPENSE}


@st.cache_resource
def get_tracker() -> FinanceTracker:
    """Get or create the tracker (cached for the session)."""
    app_settings = get_settings().app
    configure_logging(app_settings.effective_log_level, app_settings.render_json_logs)
    return create_app_components(use_storage=True)


def format_currency(amount: Decimal) -> str:
    symbol = get_settings().app.currency_symbol
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def main():
    """Main application entry point."""
    tracker = get_tracker()

    st.sidebar.title("💵 Finance Tracker")
    st.sidebar.markdown("---")
    page = st.sidebar.radio("Navigate to:", ["📊 Dashboard", "📒 Transactions"], index=0)

    if page == "📊 Dashboard":
        render_dashboard_page(tracker)
    else:
        render_transactions_page(tracker)


def render_dashboard_page(tracker: FinanceTracker):
    """Render summary cards and the four charts."""
    st.title("📊 Financial Dashboard")
    data = tracker.dashboard()
    summary = data.summary

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Income", format_currency(summary.total_income))
    col2.metric("Total Expenses", format_currency(summary.total_expenses))
    col3.metric("Net Amount", format_currency(summary.net_amount))
    col4.metric("Transactions", summary.transaction_count)

    left, right = st.columns(2)
    with left:
        st.subheader("Expenses by Category")
        if data.category_breakdown:
            st.bar_chart(pd.DataFrame(
                {"Amount": [float(p.value) for p in data.category_breakdown]},
                index=[p.label for p in data.category_breakdown],
            ))
        else:
            st.info("No expenses recorded yet.")

        st.subheader("Income Trend")
        st.line_chart(pd.DataFrame(
            {"Income": [float(p.value) for p in data.income_trend]},
            index=pd.Index([p.key for p in data.income_trend], name="month"),
        ))

    with right:
        st.subheader("Income vs Expenses")
        st.bar_chart(pd.DataFrame(
            {
                "Income": [float(p.income) for p in data.monthly_comparison],
                "Expenses": [float(p.expense) for p in data.monthly_comparison],
            },
            index=pd.Index([p.key for p in data.monthly_comparison], name="month"),
        ))

        st.subheader(f"Spending Trend (Last {len(data.spending_trend) - 1} Days)")
        st.line_chart(pd.DataFrame(
            {"Expenses": [float(p.value) for p in data.spending_trend]},
            index=pd.Index([p.key for p in data.spending_trend], name="day"),
        ))

    st.markdown("---")
    q1, q2, q3 = st.columns(3)
    q1.metric("Top Expense Category", summary.top_expense_category)
    q2.metric("Average Transaction", format_currency(summary.average_transaction))
    q3.metric("Total Transactions", summary.transaction_count)


def render_transactions_page(tracker: FinanceTracker):
    """Render the filterable list with add/edit/delete and CSV download."""
    st.title("📒 Transactions")

    if "sort_spec" not in st.session_state:
        st.session_state.sort_spec = SortSpec()
    if "editing_id" not in st.session_state:
        st.session_state.editing_id = None

    search = st.text_input("Search description or category", "")
    f1, f2, f3 = st.columns(3)
    kind_label = f1.selectbox("Type", list(KIND_LABELS))
    category_label = f2.selectbox("Category", ["All"] + tracker.categories_in_use())
    with f3:
        st.write("Sort by")
        s1, s2 = st.columns(2)
        if s1.button("Date"):
            st.session_state.sort_spec = st.session_state.sort_spec.toggle(SortField.DATE)
        if s2.button("Amount"):
            st.session_state.sort_spec = st.session_state.sort_spec.toggle(SortField.AMOUNT)

    filters = FilterSpec(
        kind=KIND_LABELS[kind_label],
        category=None if category_label == "All" else category_label,
        search_term=search,
    )
    sort = st.session_state.sort_spec
    view = tracker.transactions_view(filters, sort)
    view_summary = tracker.summary(view)

    m1, m2, m3 = st.columns(3)
    m1.metric("Showing", len(view))
    m2.metric("Income", format_currency(view_summary.total_income))
    m3.metric("Expenses", format_currency(view_summary.total_expenses))
    st.caption(f"Sorted by {sort.field.value} ({sort.direction.value})")

    filename, content = tracker.render_csv()
    st.download_button(
        "⬇️ Export CSV",
        data=content,
        file_name=filename,
        mime="text/csv",
        on_click=tracker.record_csv_export,
        args=(filename, len(tracker.transactions)),
    )

    for transaction in view:
        render_transaction_row(tracker, transaction)

    st.markdown("---")
    editing = tracker_lookup(tracker, st.session_state.editing_id)
    render_transaction_form(tracker, editing)


def tracker_lookup(tracker: FinanceTracker, transaction_id: Optional[str]) -> Optional[Transaction]:
    if transaction_id is None:
        return None
    return next((t for t in tracker.transactions if t.id == transaction_id), None)


def render_transaction_row(tracker: FinanceTracker, transaction: Transaction):
    sign = "+" if transaction.is_income else "-"
    c1, c2, c3, c4, c5 = st.columns([2, 4, 2, 1, 1])
    c1.write(transaction.occurred_at.isoformat())
    c2.write(f"**{transaction.description}** · {transaction.category}")
    c3.write(f"{sign}{format_currency(transaction.amount)}")
    if c4.button("✏️", key=f"edit-{transaction.id}"):
        st.session_state.editing_id = transaction.id
        st.rerun()
    if c5.button("🗑️", key=f"delete-{transaction.id}"):
        if tracker.delete_transaction(transaction.id) == MutationResult.NOT_FOUND:
            st.warning("That transaction no longer exists.")
        st.rerun()


def render_transaction_form(tracker: FinanceTracker, editing: Optional[Transaction]):
    """Add or edit form. Validation lives here, not in the ledger."""
    st.subheader("Edit Transaction" if editing else "Add Transaction")

    kinds = [TransactionKind.INCOME, TransactionKind.EXPENSE]
    kind = st.radio(
        "Type",
        kinds,
        index=kinds.index(editing.kind) if editing else 1,
        format_func=lambda k: k.value.title(),
        horizontal=True,
    )
    choices = tracker.category_choices(kind)
    if editing and editing.category not in choices:
        choices = [editing.category] + choices

    with st.form("transaction_form", clear_on_submit=True):
        amount_text = st.text_input("Amount", value=str(editing.amount) if editing else "")
        description = st.text_input("Description", value=editing.description if editing else "")
        category = st.selectbox(
            "Category",
            choices,
            index=choices.index(editing.category) if editing else 0,
        )
        occurred_at = st.date_input("Date", value=editing.occurred_at if editing else date.today())
        submitted = st.form_submit_button("Save")

    if not submitted:
        return

    errors = []
    try:
        amount = Decimal(amount_text)
        if amount <= 0:
            errors.append("Please enter a valid amount")
    except InvalidOperation:
        errors.append("Please enter a valid amount")
    if not description.strip():
        errors.append("Description is required")
    if not category:
        errors.append("Category is required")
    if errors:
        for message in errors:
            st.error(message)
        return

    data = TransactionInput(
        kind=kind,
        amount=amount,
        description=description,
        category=category,
        occurred_at=occurred_at,
    )
    if editing:
        if tracker.edit_transaction(editing.id, data) == MutationResult.NOT_FOUND:
            st.error("This transaction was deleted before your edit could be saved.")
        st.session_state.editing_id = None
    else:
        tracker.add_transaction(data)
    st.success("Saved.")
    st.rerun()


if __name__ == "__main__":
    main()
