"""
Configuration Management for Finance Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Storage location, analytics defaults and logging switches are validated
once at startup instead of being scattered through the code.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Local JSON persistence configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_STORAGE_",
        extra="ignore"
    )

    data_dir: Path = Field(
        default=Path(".finance_tracker"),
        description="Directory holding the persisted JSON files"
    )
    transactions_file: str = Field(
        default="transactions.json",
        description="File name for the transaction list"
    )
    categories_file: str = Field(
        default="categories.json",
        description="File name for the category catalogue"
    )

    @field_validator("transactions_file", "categories_file")
    @classmethod
    def validate_plain_file_name(cls, v: str) -> str:
        """File names must not escape the data directory."""
        if not v or Path(v).name != v:
            raise ValueError(f"Expected a plain file name, got {v!r}")
        return v

    @property
    def transactions_path(self) -> Path:
        return self.data_dir / self.transactions_file

    @property
    def categories_path(self) -> Path:
        return self.data_dir / self.categories_file


class AnalyticsSettings(BaseSettings):
    """Defaults for the dashboard series and summary."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_ANALYTICS_",
        extra="ignore"
    )

    spending_trend_days: int = Field(
        default=30,
        ge=1,
        le=366,
        description="Trailing days shown by the spending trend"
    )
    income_trend_months: int = Field(
        default=6,
        ge=1,
        le=60,
        description="Trailing months shown by the income trend"
    )
    no_category_label: str = Field(
        default="N/A",
        min_length=1,
        description="Shown as top expense category when there are no expenses"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )
    json_logs: bool = Field(
        default=True,
        description="Render logs as JSON (False gives console output)"
    )
    seed_sample_data: bool = Field(
        default=True,
        description="Start with the sample ledger when nothing is persisted"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=3,
        description="Symbol used when formatting amounts for display"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_production(self) -> bool:
        return self.app_environment.lower() == "production"

    @property
    def effective_log_level(self) -> str:
        """Debug mode always logs at DEBUG."""
        return "DEBUG" if self.debug_mode else self.log_level

    @property
    def render_json_logs(self) -> bool:
        """Production always renders JSON; elsewhere json_logs decides."""
        return self.json_logs or self.is_production


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are built on access so a broken section only fails
    # the code that needs it.

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def analytics(self) -> AnalyticsSettings:
        return AnalyticsSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid} plus an
    "<name>_error" entry for each failing section.
    """
    results = {}
    settings = get_settings()

    for name in ("storage", "analytics", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
