"""Unit tests for core infrastructure: settings, clock, results and logging."""

import logging
from datetime import datetime, timedelta, timezone
from typing import get_args, get_origin

import pytest
from pydantic import ValidationError

from gridboard.core.clock import (
    filename_safe_timestamp,
    fixed_clock,
    iso_timestamp,
    resolve_clock,
    system_clock,
)
from gridboard.core.config import Settings, clear_settings_cache, get_settings
from gridboard.core.logging_utils import get_logger
from gridboard.core.result_types import Err, Ok, Result
from gridboard.errors import DashboardError, InvalidFormat, SchemaError
from tests.fixtures.test_data import FIXED_FILENAME_TIMESTAMP, FIXED_ISO, FIXED_NOW


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self) -> None:
        """Test default settings values."""
        settings = get_settings()
        assert settings.document_version == "1.0"
        assert settings.default_theme == "default"
        assert settings.default_title == "Untitled Dashboard"
        assert settings.new_dashboard_title == "New Dashboard"
        assert settings.json_indent == 2
        assert settings.backup_prefix == "dashboard-backup"
        assert settings.log_level == "INFO"

    def test_settings_are_cached(self) -> None:
        """Test that get_settings returns one instance until cleared."""
        first = get_settings()
        assert get_settings() is first
        clear_settings_cache()
        assert get_settings() is not first

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test GRIDBOARD_* environment variables."""
        monkeypatch.setenv("GRIDBOARD_LOG_LEVEL", "debug")
        monkeypatch.setenv("GRIDBOARD_JSON_INDENT", "0")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.json_indent == 0

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("GRIDBOARD_LOG_LEVEL", "LOUD"),
            ("GRIDBOARD_JSON_INDENT", "9"),
            ("GRIDBOARD_BACKUP_PREFIX", "bad/prefix"),
        ],
    )
    def test_invalid_values(self, monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
        """Test that invalid settings are rejected at load time."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings()

    def test_frozen(self) -> None:
        """Test that settings are immutable."""
        with pytest.raises(ValidationError):
            get_settings().json_indent = 4  # type: ignore[misc]


class TestClock:
    """Test the injectable clock."""

    def test_fixed_clock(self) -> None:
        """Test that a fixed clock always reports the same moment."""
        clock = fixed_clock(FIXED_NOW)
        assert clock() == FIXED_NOW
        assert clock() is clock()

    def test_naive_moment_is_utc(self) -> None:
        """Test that naive datetimes are read as UTC."""
        clock = fixed_clock(datetime(2025, 1, 15, 10, 30, 45, 123000))
        assert clock().tzinfo is timezone.utc
        assert iso_timestamp(clock) == FIXED_ISO

    def test_iso_timestamp(self) -> None:
        """Test millisecond ISO formatting with a Z suffix."""
        assert iso_timestamp(fixed_clock(FIXED_NOW)) == FIXED_ISO

    def test_iso_timestamp_converts_to_utc(self) -> None:
        """Test that offsets are normalized to UTC."""
        offset = timezone(timedelta(hours=2))
        moment = datetime(2025, 1, 15, 12, 30, 45, 123999, tzinfo=offset)
        assert iso_timestamp(fixed_clock(moment)) == FIXED_ISO

    def test_filename_safe_timestamp(self) -> None:
        """Test that colons and dots are replaced."""
        assert filename_safe_timestamp(fixed_clock(FIXED_NOW)) == FIXED_FILENAME_TIMESTAMP

    def test_resolve_clock(self) -> None:
        """Test that the system clock is used when none is injected."""
        clock = fixed_clock(FIXED_NOW)
        assert resolve_clock(clock) is clock
        assert resolve_clock(None) is system_clock
        assert system_clock().tzinfo is timezone.utc


class TestResultType:
    """Test Result type for error handling."""

    def test_ok_result(self) -> None:
        """Test creating successful Result."""
        result: Result[int, str] = Ok(3)
        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 3

    def test_err_result(self) -> None:
        """Test creating error Result."""
        result: Result[int, str] = Err("nope")
        assert result.is_err()
        assert not result.is_ok()
        assert result.unwrap_err() == "nope"

    def test_unwrap_mismatch_raises(self) -> None:
        """Test unwrapping the wrong side raises ValueError."""
        with pytest.raises(ValueError, match="Err value: nope"):
            Err("nope").unwrap()
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_annotation_is_ok_or_err(self) -> None:
        """Test that Result[T, E] stands for the Ok | Err union."""
        members = get_args(Result[int, str])
        assert [get_origin(member) for member in members] == [Ok, Err]

    def test_results_are_frozen_values(self) -> None:
        """Test that results compare by value and cannot be reassigned."""
        assert Ok(1) == Ok(1)
        assert Err("a") != Err("b")
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]


class TestErrors:
    """Test the error hierarchy."""

    def test_to_dict(self) -> None:
        """Test structured error payloads."""
        error = SchemaError("widgets[0].id", "is missing or not a string", widget_ids=("w",))
        assert error.to_dict() == {
            "error": "SchemaError",
            "message": "Invalid dashboard data: widgets[0].id is missing or not a string",
            "path": "widgets[0].id",
            "widgetIds": ["w"],
        }

    def test_minimal_payload(self) -> None:
        """Test that absent context is omitted."""
        assert DashboardError("boom").to_dict() == {"error": "DashboardError", "message": "boom"}

    def test_invalid_format_is_value_error(self) -> None:
        """Test that coordinate errors can be caught as ValueError."""
        assert issubclass(InvalidFormat, ValueError)


class TestLogging:
    """Test logger helpers."""

    def test_module_logger_is_namespaced(self) -> None:
        """Test that engine loggers live under the gridboard namespace."""
        assert get_logger("gridboard.services.geometry").name == "gridboard.services.geometry"
        assert get_logger().name == "gridboard"

    def test_level_override(self) -> None:
        """Test setting a logger level explicitly."""
        logger = get_logger("gridboard.tests.level", level=logging.ERROR)
        assert logger.level == logging.ERROR

    def test_migration_warning_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that moving a widget during migration logs a warning."""
        from gridboard.services.layout_migration import fit_widget_to_layout
        from tests.fixtures.test_data import DashboardFactory

        with caplog.at_level(logging.WARNING, logger="gridboard"):
            fit_widget_to_layout(
                DashboardFactory.widget("w", column=3, row=3),
                DashboardFactory.layout(columns=2, rows=2),
            )
        assert "Moved widget w" in caplog.text
