"""
Finance Tracker - Source Package

A personal finance tracker: records income and expense transactions,
persists them locally and derives summaries, category breakdowns and
time-series trends for display.

DESIGN PRINCIPLES:
1. Data flows one way: store -> filter/sort -> aggregation/bucketing
2. Engines are pure functions over snapshots
3. Series are dense: every requested bucket is materialized
4. Every mutation is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Finance Tracker Team"
