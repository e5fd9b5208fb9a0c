"""Tests for runtime configuration and logging setup."""

import io
import logging
import pytest
import sys
from datetime import datetime, timedelta

from dateutil import tz

from budgetkit.config import (
    LOG_LEVEL_ENV,
    TIMEZONE_ENV,
    resolve_log_level,
    resolve_timezone,
)
from budgetkit.database.factories import create_sqlite_database, resolve_database_path
from budgetkit.utils.logger import configure_logging, get_logger


class TestResolveTimezone:
    def test_explicit_name(self, monkeypatch):
        monkeypatch.delenv(TIMEZONE_ENV, raising=False)
        assert resolve_timezone("Europe/Stockholm") == tz.gettz("Europe/Stockholm")

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv(TIMEZONE_ENV, "America/New_York")
        assert resolve_timezone() == tz.gettz("America/New_York")

    def test_explicit_name_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv(TIMEZONE_ENV, "America/New_York")
        zone = resolve_timezone("UTC")
        assert datetime(2024, 7, 1, tzinfo=zone).utcoffset() == timedelta(0)

    def test_defaults_to_local(self, monkeypatch):
        monkeypatch.delenv(TIMEZONE_ENV, raising=False)
        assert isinstance(resolve_timezone(), tz.tzlocal)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            resolve_timezone("Mars/Olympus")


class TestResolveLogLevel:
    def test_verbosity_flags(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_log_level(0) == logging.WARNING
        assert resolve_log_level(1) == logging.INFO
        assert resolve_log_level(2) == logging.DEBUG
        assert resolve_log_level(5) == logging.DEBUG

    def test_environment_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert resolve_log_level(0) == logging.INFO

    def test_flags_win_over_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert resolve_log_level(2) == logging.DEBUG

    def test_unknown_environment_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert resolve_log_level(0) == logging.WARNING


def test_configure_logging_sets_package_level():
    configure_logging(logging.DEBUG)
    configure_logging(logging.INFO)

    package_logger = logging.getLogger("budgetkit")
    assert package_logger.level == logging.INFO
    assert len(package_logger.handlers) == 1
    assert get_logger("budgetkit.domain.alerts").getEffectiveLevel() == logging.INFO



def test_log_output_follows_replaced_stderr(monkeypatch):
    configure_logging(logging.INFO)
    captured = io.StringIO()
    monkeypatch.setattr(sys, "stderr", captured)

    get_logger("budgetkit.domain.alerts").info("Checked 2 alerts")

    assert "INFO     | budgetkit.domain.alerts | Checked 2 alerts" in captured.getvalue()


def test_database_path_from_environment(monkeypatch, tmp_path):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("BUDGETKIT_DB_PATH", str(db_path))

    db = create_sqlite_database()

    assert db.database_url == f"sqlite:///{db_path}"


def test_database_path_expands_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_database_path("~/ledger.db") == tmp_path / "ledger.db"
