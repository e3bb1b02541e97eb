"""
Tests para logs del navegador.

Cubre:
- LogLevel.parse
- LogEntry.from_dict (timestamp en ms, niveles desconocidos)
- get_browser_logs / get_browser_logs_as_dicts / filter_logs
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from webtestkit.domain.models.log_models import LogEntry, LogLevel
from webtestkit.infrastructure.browser.extensions.logs import (
    filter_logs,
    get_browser_logs,
    get_browser_logs_as_dicts,
)


class TestLogLevel:
    """Tests para LogLevel."""

    @pytest.mark.parametrize("raw,expected", [
        ("SEVERE", LogLevel.SEVERE),
        ("warning", LogLevel.WARNING),
        (" Info ", LogLevel.INFO),
        (LogLevel.DEBUG, LogLevel.DEBUG),
    ])
    def test_parse(self, raw, expected):
        assert LogLevel.parse(raw) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            LogLevel.parse("FATAL")


class TestLogEntry:
    """Tests para LogEntry."""

    def test_from_dict(self):
        entry = LogEntry.from_dict(
            {"level": "SEVERE", "message": "boom", "source": "javascript", "timestamp": 1700000000000}
        )
        assert entry.level is LogLevel.SEVERE
        assert entry.message == "boom"
        assert entry.source == "javascript"
        assert entry.timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_unknown_level_maps_to_all(self):
        assert LogEntry.from_dict({"level": "FATAL", "message": "x"}).level is LogLevel.ALL

    def test_missing_fields(self):
        entry = LogEntry.from_dict({})
        assert entry.level is LogLevel.ALL
        assert entry.message == ""
        assert entry.timestamp is None
        assert entry.source is None

    def test_is_frozen(self):
        entry = LogEntry.from_dict({"level": "INFO", "message": "x"})
        with pytest.raises(Exception):
            entry.message = "y"


class TestBrowserLogs:
    """Tests para lectura y filtrado de logs."""

    def test_reads_browser_log(self, mock_driver, browser_log_entries):
        mock_driver.get_log.return_value = browser_log_entries
        raw = get_browser_logs_as_dicts(mock_driver)
        mock_driver.get_log.assert_called_once_with("browser")
        assert raw == browser_log_entries

    def test_none_log_is_empty(self, mock_driver):
        mock_driver.get_log.return_value = None
        assert get_browser_logs(mock_driver) == []

    def test_entries_are_parsed(self, mock_driver, browser_log_entries):
        mock_driver.get_log.return_value = browser_log_entries
        entries = get_browser_logs(mock_driver)
        assert [e.level for e in entries] == [
            LogLevel.SEVERE, LogLevel.WARNING, LogLevel.INFO, LogLevel.SEVERE,
        ]

    def test_filter_exact_level(self, mock_driver, browser_log_entries):
        """filter_logs devuelve sólo el nivel exacto, no 'igual o superior'."""
        mock_driver.get_log.return_value = browser_log_entries
        entries = get_browser_logs(mock_driver)
        severe = filter_logs(entries, "severe")
        assert [e.message for e in severe] == ["Uncaught TypeError: x is undefined", "404 favicon.ico"]
        assert [e.message for e in filter_logs(entries, LogLevel.WARNING)] == ["deprecated API"]
        assert filter_logs(entries, LogLevel.DEBUG) == []

    def test_requires_driver(self):
        with pytest.raises(ValueError):
            get_browser_logs(None)
