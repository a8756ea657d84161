"""Tests for settings and the audit logger."""

import pytest

from finance_tracker.audit import AuditLogger, configure_logging
from finance_tracker.config import (
    AnalyticsSettings,
    AppSettings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)
from finance_tracker.models import AuditEventBuilder, AuditEventType


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for pydantic-settings configuration."""

    def test_defaults(self):
        analytics = AnalyticsSettings()
        assert analytics.spending_trend_days == 30
        assert analytics.income_trend_months == 6
        assert analytics.no_category_label == "N/A"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FINANCE_ANALYTICS_SPENDING_TREND_DAYS", "14")
        monkeypatch.setenv("FINANCE_STORAGE_DATA_DIR", str(tmp_path))
        assert AnalyticsSettings().spending_trend_days == 14
        assert StorageSettings().transactions_path == tmp_path / "transactions.json"

    def test_rejects_out_of_range_trend(self):
        with pytest.raises(ValueError):
            AnalyticsSettings(income_trend_months=0)

    def test_log_level_is_normalized(self):
        assert AppSettings(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValueError):
            AppSettings(log_level="chatty")

    def test_debug_mode_forces_debug_logging(self):
        assert AppSettings(log_level="warning").effective_log_level == "WARNING"
        assert AppSettings(log_level="warning", debug_mode=True).effective_log_level == "DEBUG"

    @pytest.mark.parametrize("environment, json_logs, expected", [
        ("development", False, False),
        ("development", True, True),
        ("production", False, True),
        ("Production", False, True),
    ])
    def test_render_json_logs(self, environment, json_logs, expected):
        settings = AppSettings(app_environment=environment, json_logs=json_logs)
        assert settings.render_json_logs is expected

    def test_validate_all_settings(self, monkeypatch):
        assert validate_all_settings() == {"storage": True, "analytics": True, "app": True}

        monkeypatch.setenv("FINANCE_ANALYTICS_INCOME_TREND_MONTHS", "-3")
        results = validate_all_settings()
        assert results["analytics"] is False
        assert "analytics_error" in results


class TestAuditLogger:
    """Tests for the structlog-backed audit logger."""

    def test_recent_events_newest_first(self):
        audit = AuditLogger()
        audit.log_transaction_deleted("a")
        audit.log_target_missing("update", "b")
        assert [e.event_type for e in audit.recent_events] == [
            AuditEventType.UPDATE_TARGET_MISSING,
            AuditEventType.TRANSACTION_DELETED,
        ]

    def test_history_is_bounded(self):
        audit = AuditLogger(history_size=2)
        for i in range(5):
            audit.log_transaction_deleted(str(i))
        assert [e.entity_id for e in audit.recent_events] == ["4", "3"]

    def test_persistence_failure_details(self):
        audit = AuditLogger()
        audit.log_persistence_failed("save_transactions", "disk full", {"version": 7})
        event = audit.recent_events[0]
        assert event.details == {"operation": "save_transactions", "version": 7}

    def test_logs_through_configured_structlog(self, capsys):
        configure_logging("INFO", json_logs=True)
        AuditLogger().log(AuditEventBuilder.csv_exported(3, "transactions-2025-09-01.csv"))
        # Log output goes to stderr through the stdlib handler; nothing raises
        assert capsys.readouterr().out == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
