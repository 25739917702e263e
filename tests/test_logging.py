"""
Tests for the logging configuration.
"""

import logging

import pytest

from app.shared.logging import (
    LOG_FORMAT,
    QUIET_LOGGERS,
    build_logging_config,
    configure_logging,
    resolve_level,
)


class TestResolveLevel:
    """Tests for resolve_level."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (" error ", logging.ERROR)],
    )
    def test_known_names(self, name: str, expected: int) -> None:
        assert resolve_level(name) == expected

    def test_unknown_name_falls_back_to_info(self) -> None:
        assert resolve_level("chatty") == logging.INFO


class TestConfigureLogging:
    """Tests for build_logging_config and configure_logging."""

    def test_config_uses_shared_format(self) -> None:
        config = build_logging_config("DEBUG")
        assert config["formatters"]["default"]["format"] == LOG_FORMAT
        assert config["root"]["level"] == logging.DEBUG
        assert config["disable_existing_loggers"] is False

    def test_configure_sets_levels(self) -> None:
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("DEBUG")
            assert root.level == logging.DEBUG
            for name in QUIET_LOGGERS:
                assert logging.getLogger(name).level == logging.WARNING
        finally:
            configure_logging(logging.getLevelName(previous))
