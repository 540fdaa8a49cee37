"""Tests for the package logger."""

import logging

import pytest

from proactive_audio.core.logger import LOG_LEVELS, logger, set_log_level


@pytest.fixture(autouse=True)
def restore_level():
    level = logger.level
    yield
    logger.setLevel(level)


class TestSetLogLevel:
    @pytest.mark.parametrize("level", LOG_LEVELS)
    def test_accepts_known_levels(self, level):
        set_log_level(level.lower())

        assert logger.level == getattr(logging, level)

    def test_ignores_unknown_level(self):
        set_log_level("WARNING")

        set_log_level("verbose")

        assert logger.level == logging.WARNING

    def test_cli_offers_the_same_levels(self):
        from proactive_audio.cli.main import create_parser

        args = create_parser().parse_args(["--log-level", "ERROR", "card"])

        assert args.log_level == "ERROR"
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--log-level", "verbose", "card"])
