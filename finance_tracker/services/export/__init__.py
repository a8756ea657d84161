"""Export package."""

from finance_tracker.services.export.csv_export import (
    CSV_HEADERS,
    export_filename,
    transactions_to_csv,
)

__all__ = ["CSV_HEADERS", "export_filename", "transactions_to_csv"]
