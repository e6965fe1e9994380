"""Unit tests for logging and Logfire setup helpers."""

import logging

import logfire
import pytest

from pawprint.config import ObservabilitySettings, Settings
from pawprint.util.logging import QUIET_LOGGERS, setup_logging
from pawprint.util.observability import _should_send


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    quiet_levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, quiet_level in quiet_levels.items():
        logging.getLogger(name).setLevel(quiet_level)


class TestShouldSend:
    """Export to Logfire cloud."""

    def test_console_only_without_token(self):
        assert _should_send(Settings(observability=ObservabilitySettings())) is False

    def test_token_enables_export(self):
        settings = Settings(observability=ObservabilitySettings(logfire_token="tok"))
        assert _should_send(settings) is True

    def test_explicit_flag_wins_over_token(self):
        """OBSERVABILITY__SEND_TO_LOGFIRE=false keeps a configured token local."""
        # Arrange
        settings = Settings(
            observability=ObservabilitySettings(logfire_token="tok", send_to_logfire=False)
        )

        # Act / Assert
        assert _should_send(settings) is False


class TestSetupLogging:
    """Stdlib logging forwarded to logfire."""

    def test_root_logger_uses_logfire_handler(self, restore_root_logger):
        # Act
        setup_logging(Settings(debug=False))

        # Assert
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logfire.LogfireLoggingHandler)

    def test_debug_lowers_level_and_quiets_libraries(self, restore_root_logger):
        # Act
        setup_logging(Settings(debug=True))

        # Assert
        assert logging.getLogger().level == logging.DEBUG
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
