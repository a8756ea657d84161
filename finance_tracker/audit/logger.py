"""
Audit Logger

DESIGN DECISION: Every ledger mutation is logged.
This provides:
1. Complete traceability
2. Debugging capability when persistence fails
3. A visible record of stale edits the store refused

The audit logger:
- Is synchronous, like the rest of the engine
- Never raises into the caller's flow
- Keeps a bounded in-memory trail the UI can show
"""

import logging
from collections import deque
from typing import Optional

import structlog

from finance_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditEventType
from finance_tracker.models.transaction import Category, Transaction


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structlog on top of the standard library logger.

    JSON output for production, console rendering for local work.
    """
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events to the structured local log and remembers the most
    recent ones in memory.
    """

    def __init__(self, history_size: int = 200):
        self._logger = structlog.get_logger("finance_tracker.audit")
        self._history: deque[AuditEvent] = deque(maxlen=history_size)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        self._history.append(event)
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    @property
    def recent_events(self) -> list[AuditEvent]:
        """Recent events, newest first."""
        return list(reversed(self._history))

    def log_transaction_added(self, transaction: Transaction) -> None:
        self.log(AuditEventBuilder.transaction_added(transaction))

    def log_transaction_updated(self, transaction: Transaction) -> None:
        self.log(AuditEventBuilder.transaction_updated(transaction))

    def log_transaction_deleted(self, transaction_id: str) -> None:
        self.log(AuditEventBuilder.transaction_deleted(transaction_id))

    def log_target_missing(self, operation: str, transaction_id: str) -> None:
        """Log an update/delete that addressed an unknown id."""
        self.log(AuditEventBuilder.target_missing(operation, transaction_id))

    def log_transactions_loaded(self, count: int, source: str) -> None:
        self.log(AuditEventBuilder.transactions_loaded(count, source))

    def log_category_changed(
        self,
        event_type: AuditEventType,
        category: Category,
    ) -> None:
        self.log(AuditEventBuilder.category_changed(event_type, category))

    def log_categories_reset(self, count: int) -> None:
        self.log(AuditEventBuilder.categories_reset(count))

    def log_persistence_failed(
        self,
        operation: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> None:
        event = AuditEventBuilder.persistence_failed(operation, error_message)
        if details:
            event.details.update(details)
        self.log(event)

    def log_csv_exported(self, row_count: int, filename: str) -> None:
        self.log(AuditEventBuilder.csv_exported(row_count, filename))
