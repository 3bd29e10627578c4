"""
Tests for logging configuration and the debug records emitted by treelog
"""

import logging

import pytest

from treelog.computation import success, failure
from treelog.log_setup import LIBRARY_LOGGER, resolve_level, setup_logging
from treelog.syntax import hoist, fold_log


@pytest.fixture
def restore_logging():
    """Put the root handlers and both logger levels back after a test."""
    root = logging.getLogger()
    library = logging.getLogger(LIBRARY_LOGGER)
    saved = (list(root.handlers), root.level, library.level)
    yield
    for handler in root.handlers[:]:
        if handler not in saved[0]:
            root.removeHandler(handler)
            handler.close()
    for handler in saved[0]:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved[1])
    library.setLevel(saved[2])


@pytest.mark.usefixtures("restore_logging")
class TestSetupLogging:
    def test_defaults(self):
        logger = setup_logging()
        assert logger.name == LIBRARY_LOGGER
        assert logging.getLogger().level == logging.INFO
        assert logger.level == logging.WARNING

    def test_verbose_sets_debug_everywhere(self):
        logger = setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logger.level == logging.DEBUG

    def test_explicit_level_wins(self):
        setup_logging(level="warning", verbose=True)
        assert logging.getLogger().level == logging.WARNING

    def test_library_level_is_independent(self):
        logger = setup_logging(level="INFO", library_level="DEBUG", format_style="compact")
        assert logging.getLogger().level == logging.INFO
        assert logger.level == logging.DEBUG

    def test_unknown_format_style(self):
        with pytest.raises(ValueError):
            setup_logging(format_style="fancy")

    @pytest.mark.parametrize("level, expected", [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (logging.ERROR, logging.ERROR),
    ])
    def test_resolve_level(self, level, expected):
        assert resolve_level(level) == expected

    def test_resolve_unknown_level(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")


class TestDebugRecords:
    def test_hoist_reports_adoption(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=LIBRARY_LOGGER):
            hoist("Parent", success(1))
        assert "adopting" in caplog.text

    def test_hoist_reports_wrapping(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=LIBRARY_LOGGER):
            hoist("Parent", success(1, "Child"))
        assert "wrapping" in caplog.text

    def test_fold_reports_stop(self, caplog):
        def step(total, x):
            return success(total + x, "ok") if x < 2 else failure(f"Cannot add {x}")

        with caplog.at_level(logging.DEBUG, logger=LIBRARY_LOGGER):
            fold_log("Summing", success(0), step, [1, 2, 3])
        assert "stopped at item 1" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
