"""
Time-Series Bucketing Engine

Turns a transaction set into presentation-ready series for the dashboard.

BUCKET ALIGNMENT: bucket boundaries come from calendar day and month
starts, never from the transactions themselves. A transaction lands in
the bucket whose [start, end] range contains its occurred_at, both ends
inclusive.

DENSE SERIES: every bucket in the requested range is materialized, with
zero when nothing falls into it. Only the category breakdown is
data-driven, because there is no fixed universe of categories.

`today` is injectable everywhere so series are reproducible in tests.
"""

from bisect import bisect_right
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from finance_tracker.analytics.summary import expense_totals_by_category
from finance_tracker.models.transaction import Transaction, TransactionKind
from finance_tracker.models.views import ComparisonPoint, SeriesPoint

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DEFAULT_TREND_DAYS = 30
DEFAULT_TREND_MONTHS = 6


@dataclass(frozen=True)
class Bucket:
    """A closed calendar interval with its series key and display label."""
    key: str
    label: str
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


# =============================================================================
# CALENDAR HELPERS
# =============================================================================

def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    return day + relativedelta(day=31)


def add_months(day: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    return day + relativedelta(months=months)


def month_bucket(first_day: date, label: Optional[str] = None) -> Bucket:
    return Bucket(
        key=first_day.strftime("%Y-%m"),
        label=label or f"{MONTH_ABBREVIATIONS[first_day.month - 1]} {first_day.year}",
        start=first_day,
        end=month_end(first_day),
    )


def day_bucket(day: date) -> Bucket:
    return Bucket(
        key=day.isoformat(),
        label=f"{day.month:02d}/{day.day:02d}",
        start=day,
        end=day,
    )


# =============================================================================
# FOLDING
# =============================================================================

def fold_into_buckets(
    buckets: Sequence[Bucket],
    transactions: Iterable[Transaction],
    kind: TransactionKind,
    include: Callable[[Transaction], bool] = lambda t: True,
) -> list[Decimal]:
    """
    Sum amounts of one kind per bucket.

    `buckets` must be chronological and non-overlapping. Transactions
    outside every bucket, or rejected by `include`, are ignored.
    """
    totals = [Decimal("0")] * len(buckets)
    starts = [b.start for b in buckets]

    for t in transactions:
        if t.kind != kind or not include(t):
            continue
        index = bisect_right(starts, t.occurred_at) - 1
        if index >= 0 and buckets[index].contains(t.occurred_at):
            totals[index] += t.amount

    return totals


# =============================================================================
# SERIES
# =============================================================================

def category_breakdown(transactions: Iterable[Transaction]) -> list[SeriesPoint]:
    """Expense totals per category, in first-seen order (pie chart)."""
    return [
        SeriesPoint(key=name, label=name, value=total)
        for name, total in expense_totals_by_category(transactions).items()
    ]


def year_month_buckets(year: int) -> list[Bucket]:
    return [
        month_bucket(date(year, month, 1), label=MONTH_ABBREVIATIONS[month - 1])
        for month in range(1, 13)
    ]


def monthly_comparison(
    transactions: Iterable[Transaction],
    year: Optional[int] = None,
    today: Optional[date] = None,
) -> list[ComparisonPoint]:
    """
    Income and expense per calendar month of one year (bar chart).

    Always 12 points, January first. `year` defaults to the year of
    `today`, which defaults to the current date.
    """
    if year is None:
        year = (today or date.today()).year

    transactions = list(transactions)
    buckets = year_month_buckets(year)
    income = fold_into_buckets(buckets, transactions, TransactionKind.INCOME)
    expense = fold_into_buckets(buckets, transactions, TransactionKind.EXPENSE)

    return [
        ComparisonPoint(key=b.key, label=b.label, income=i, expense=e)
        for b, i, e in zip(buckets, income, expense)
    ]


def trailing_day_buckets(days: int, today: date) -> list[Bucket]:
    """days + 1 daily buckets from today - days through today."""
    first = today - timedelta(days=days)
    return [day_bucket(first + timedelta(days=offset)) for offset in range(days + 1)]


def spending_trend(
    transactions: Iterable[Transaction],
    days: int = DEFAULT_TREND_DAYS,
    today: Optional[date] = None,
) -> list[SeriesPoint]:
    """Daily expense totals over the trailing `days` days (line chart)."""
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")

    buckets = trailing_day_buckets(days, today or date.today())
    totals = fold_into_buckets(buckets, transactions, TransactionKind.EXPENSE)
    return [SeriesPoint(key=b.key, label=b.label, value=v) for b, v in zip(buckets, totals)]


def trailing_month_buckets(months: int, today: date) -> list[Bucket]:
    """`months` monthly buckets ending with the month containing today."""
    current = month_start(today)
    return [month_bucket(add_months(current, -offset)) for offset in range(months - 1, -1, -1)]


def income_trend(
    transactions: Iterable[Transaction],
    months: int = DEFAULT_TREND_MONTHS,
    today: Optional[date] = None,
) -> list[SeriesPoint]:
    """
    Monthly income totals over the trailing `months` months (line chart).

    A transaction must also lie in [today - months, today]; income dated
    later in the current month than today is not counted yet.
    """
    if months < 1:
        raise ValueError(f"months must be >= 1, got {months}")

    today = today or date.today()
    window_start = add_months(today, -months)
    buckets = trailing_month_buckets(months, today)
    totals = fold_into_buckets(
        buckets,
        transactions,
        TransactionKind.INCOME,
        include=lambda t: window_start <= t.occurred_at <= today,
    )
    return [SeriesPoint(key=b.key, label=b.label, value=v) for b, v in zip(buckets, totals)]
