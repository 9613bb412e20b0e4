"""
Unit tests for logging processors and setup.
"""

from unittest.mock import MagicMock

import pytest

from mudcombat.structured_logging import enhanced_logging_config
from mudcombat.structured_logging.enhanced_logging_config import (
    detect_environment,
    get_logger,
    log_exception_once,
    setup_enhanced_logging,
)
from mudcombat.structured_logging.logging_processors import (
    add_correlation_id,
    strip_markup,
    strip_narration_markup,
)


def test_strip_markup():
    """Inline tags are removed, other text is kept."""
    assert strip_markup("<b><red>You killed Bob!</red></b>") == "You killed Bob!"
    assert strip_markup("a < b and c > d") == "a < b and c > d"


def test_strip_narration_markup_only_touches_narration_fields():
    event_dict = {"event": "Narration sent", "message": "<b>Hi</b>", "character_id": "<b>x</b>"}

    result = strip_narration_markup(None, "info", event_dict)

    assert result["message"] == "Hi"
    assert result["character_id"] == "<b>x</b>"


def test_add_correlation_id_preserves_existing():
    assert add_correlation_id(None, "info", {"correlation_id": "abc"})["correlation_id"] == "abc"
    assert add_correlation_id(None, "info", {})["correlation_id"]


def test_detect_environment_under_pytest():
    assert detect_environment() == "unit_test"


@pytest.fixture
def logging_state(monkeypatch):
    """Isolate the module-level initialization flag."""
    state = enhanced_logging_config._LoggingState()
    monkeypatch.setattr(enhanced_logging_config, "_logging_state", state)
    return state


def test_setup_enhanced_logging_initializes_once(logging_state, monkeypatch):
    """A second setup call is skipped unless forced."""
    configure = MagicMock()
    monkeypatch.setattr(enhanced_logging_config, "configure_enhanced_structlog", configure)
    config = {"logging": {"environment": "unit_test", "level": "DEBUG"}}

    setup_enhanced_logging(config)
    setup_enhanced_logging(config)

    configure.assert_called_once_with("unit_test", "DEBUG", config["logging"])
    assert logging_state.initialized is True

    setup_enhanced_logging(config, force_reconfigure=True)
    assert configure.call_count == 2


def test_log_exception_once_skips_already_logged():
    """Exceptions are logged at most once."""
    bound_logger = MagicMock()
    error = RuntimeError("boom")

    log_exception_once(bound_logger, "error", "Handler failed", exc=error)
    log_exception_once(bound_logger, "error", "Handler failed", exc=error)

    bound_logger.error.assert_called_once_with("Handler failed", error_type="RuntimeError", error="boom")
    assert error.already_logged is True


def test_get_logger_returns_bindable_logger():
    assert hasattr(get_logger(__name__), "bind")
