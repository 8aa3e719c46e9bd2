"""Tests for QuerySettings and logging setup."""

import logging
from datetime import UTC
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from payment_queries.infrastructure.config import QuerySettings
from payment_queries.infrastructure.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate settings from the developer's environment and .env file."""
    monkeypatch.delenv("PAYMENT_QUERIES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PAYMENT_QUERIES_TIMEZONE", raising=False)
    monkeypatch.chdir(tmp_path)


# =============================================================================
# QuerySettings Tests
# =============================================================================


class TestQuerySettingsDefaults:
    def test_defaults(self) -> None:
        settings = QuerySettings()

        assert settings.log_level == "INFO"
        assert settings.timezone == "UTC"

    def test_default_zone_is_utc_singleton(self) -> None:
        assert QuerySettings().zone is UTC


class TestQuerySettingsEnvironment:
    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYMENT_QUERIES_LOG_LEVEL", "debug")
        monkeypatch.setenv("PAYMENT_QUERIES_TIMEZONE", "Europe/Warsaw")

        settings = QuerySettings()

        assert settings.log_level == "DEBUG"
        assert settings.timezone == "Europe/Warsaw"
        assert settings.zone == ZoneInfo("Europe/Warsaw")

    def test_reads_dotenv_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("PAYMENT_QUERIES_LOG_LEVEL=warning\n", encoding="utf-8")

        assert QuerySettings().log_level == "WARNING"

    def test_ignores_unrelated_keys(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("SOMETHING_ELSE=1\n", encoding="utf-8")

        assert QuerySettings().log_level == "INFO"


class TestQuerySettingsValidation:
    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="log_level must be one of"):
            QuerySettings(log_level="LOUD")

    def test_rejects_unknown_timezone(self) -> None:
        with pytest.raises(ValidationError, match="Unknown timezone"):
            QuerySettings(timezone="Mars/Olympus_Mons")

    def test_utc_is_case_insensitive(self) -> None:
        assert QuerySettings(timezone="utc").zone is UTC


# =============================================================================
# configure_logging() Tests
# =============================================================================


class TestConfigureLogging:
    def test_returns_package_logger_at_configured_level(self) -> None:
        logger = configure_logging(QuerySettings(log_level="DEBUG"))

        assert logger.name == "payment_queries"
        assert logger.level == logging.DEBUG

    def test_custom_logger_name(self) -> None:
        logger = configure_logging(QuerySettings(log_level="ERROR"), log_name="reports")

        assert logger.name == "reports"
        assert logger.level == logging.ERROR

    def test_log_format_names_logger(self) -> None:
        assert "[%(name)s]" in LOG_FORMAT
