# Area: Shared Tests
"""Tests for airline_seats._shared.logging_config."""

import json
import logging

import pytest

from airline_seats import InvalidActionError, setup_logging
from airline_seats._shared.logging_config import JSONFormatter, TerminalFormatter, log_game_error


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_logging() so later tests see the default hierarchy."""
    pkg_logger = logging.getLogger("airline_seats")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield
    for handler in pkg_logger.handlers:
        if handler not in handlers:
            handler.close()
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate


def _record(level=logging.INFO, msg="hello", **extra):
    record = logging.LogRecord("airline_seats.state", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSetupLogging:
    """Tests for handler installation."""

    def test_terminal_handler_only(self):
        setup_logging()
        pkg_logger = logging.getLogger("airline_seats")
        assert len(pkg_logger.handlers) == 1
        assert isinstance(pkg_logger.handlers[0].formatter, TerminalFormatter)
        assert pkg_logger.propagate is False

    def test_json_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "match.jsonl"
        setup_logging(str(log_file), level=logging.DEBUG)

        logging.getLogger("airline_seats.state").info("Match finished")
        for handler in logging.getLogger("airline_seats").handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["level"] == "INFO"
        assert entry["logger"] == "airline_seats.state"
        assert entry["message"] == "Match finished"

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("airline_seats").handlers) == 1


class TestFormatters:
    """Tests for the terminal and JSON formatters."""

    def test_terminal_formatter_colors_copy(self):
        record = _record(logging.WARNING)
        text = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[33mWARNING\033[0m" in text
        assert record.levelname == "WARNING"

    def test_json_formatter_includes_error_type(self):
        payload = json.loads(JSONFormatter().format(_record(logging.ERROR, error_type="InvalidActionError")))
        assert payload["error_type"] == "InvalidActionError"
        assert payload["level"] == "ERROR"

    def test_json_formatter_without_error_type(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert "error_type" not in payload


class TestLogGameError:
    """Tests for structured error logging."""

    def test_logs_error_block(self, caplog):
        error = InvalidActionError(7, "PriceSetting", [0, 1, 2, 3, 4], current_player=0)
        with caplog.at_level(logging.ERROR, logger="airline_seats"):
            log_game_error(error, "airline_seats.state")
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_type == "InvalidActionError"
        assert "INVALID_ACTION" in record.getMessage()

    def test_invalid_action_is_logged_by_state(self, game, caplog):
        state = game.new_initial_state()
        with caplog.at_level(logging.ERROR, logger="airline_seats"):
            with pytest.raises(InvalidActionError):
                state.apply_action(3)
        assert any(r.name == "airline_seats.state" for r in caplog.records)
