"""Test settings, logging and error formatting."""
import json
import logging

import pytest
from pydantic import ValidationError

from blackboard.config import Settings
from blackboard.errors import ArgumentCountError, MalformedArgumentsError, PolicyError, format_error
from blackboard.logging_config import HumanReadableFormatter, StructuredFormatter


def test_settings_defaults(monkeypatch):
    """Defaults are strict pairs with no policy file."""
    monkeypatch.delenv("BLACKBOARD_STRICT_PAIRS", raising=False)
    monkeypatch.delenv("BLACKBOARD_POLICY_FILE", raising=False)
    config = Settings(_env_file=None)
    assert config.strict_pairs is True
    assert config.policy_file is None


def test_settings_from_environment(monkeypatch):
    """Settings are read from BLACKBOARD_* variables."""
    monkeypatch.setenv("BLACKBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("BLACKBOARD_STRICT_PAIRS", "false")
    config = Settings(_env_file=None)
    assert config.log_level == "DEBUG"
    assert config.strict_pairs is False


def test_settings_reject_bad_values():
    """Unknown log levels and formats fail validation."""
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD", _env_file=None)
    with pytest.raises(ValidationError):
        Settings(log_format="xml", _env_file=None)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("blackboard.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter():
    """JSON output carries agent, operation and error extras only."""
    data = json.loads(StructuredFormatter().format(
        _record(agent_id="agt_1", operation="storage/add", error={"code": "X"}, count=2)
    ))
    assert data["message"] == "hello world"
    assert data["agent_id"] == "agt_1"
    assert data["operation"] == "storage/add"
    assert data["error"] == {"code": "X"}
    assert "count" not in data


def test_human_readable_formatter():
    """Text output includes the operation tag."""
    line = HumanReadableFormatter().format(_record(operation="storage/clear"))
    assert "op:storage/clear" in line
    assert line.endswith("hello world")


def test_format_error_envelopes():
    """Known errors keep their code; others become INTERNAL_ERROR."""
    malformed = format_error(MalformedArgumentsError("odd", details={"received": 3}))["error"]
    assert malformed["code"] == "MALFORMED_ARGUMENTS"
    assert malformed["details"] == {"received": 3}
    assert "hint" in malformed

    count = format_error(ArgumentCountError("storage/remove", 1, 0))["error"]
    assert count["code"] == "ARGUMENT_COUNT"
    assert count["hint"] == "Pass at least 1 argument(s)"

    policy = format_error(PolicyError("bad"))["error"]
    assert policy["code"] == "POLICY_ERROR"
    assert "details" not in policy

    internal = format_error(RuntimeError("secret"))["error"]
    assert internal["code"] == "INTERNAL_ERROR"
    assert "secret" not in internal["message"]


def test_package_logs_reach_root_once(blackboard_caplog):
    """Package records go to the package handler and not again through root."""
    root_records = []

    class _ListHandler(logging.Handler):
        def emit(self, record):
            root_records.append(record)

    root_handler = _ListHandler()
    root = logging.getLogger()
    root.addHandler(root_handler)
    try:
        logging.getLogger("blackboard.agent").warning("only once")
    finally:
        root.removeHandler(root_handler)

    assert logging.getLogger("blackboard").propagate is False
    assert root_records == []
    assert [r.getMessage() for r in blackboard_caplog.records] == ["only once"]
