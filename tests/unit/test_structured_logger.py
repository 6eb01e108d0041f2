"""Unit tests for structured logging setup."""

from __future__ import annotations

import json
import logging

from estate_rbac.logging.structured_logger import JSONFormatter, setup_logging


def _record(msg: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("estate_rbac.rbac.session", logging.WARNING, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSON log formatting."""

    def test_base_fields(self) -> None:
        entry = json.loads(JSONFormatter().format(_record("Unrecognized role 'guest'")))
        assert entry["level"] == "WARNING"
        assert entry["component"] == "estate_rbac.rbac.session"
        assert entry["event"] == "Unrecognized role 'guest'"
        assert "timestamp" in entry

    def test_access_extras(self) -> None:
        entry = json.loads(
            JSONFormatter().format(_record("check", role="SALE", permission="deal:read", decision=True))
        )
        assert entry["role"] == "SALE"
        assert entry["permission"] == "deal:read"
        assert entry["decision"] is True

    def test_non_ascii_kept(self) -> None:
        entry = JSONFormatter().format(_record("Sếp"))
        assert "Sếp" in entry


class TestSetupLogging:
    """Test root logger configuration."""

    def test_json_format(self) -> None:
        setup_logging("DEBUG", "json")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_text_format(self) -> None:
        setup_logging("warning", "text")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_unknown_level_defaults_to_info(self) -> None:
        setup_logging("VERBOSE", "json")
        assert logging.getLogger().level == logging.INFO
