"""Tests for render settings and logging configuration.

Tests cover:
- RenderSettings defaults and validation
- Oversampled grid size
- setup_logging handler management
"""

import logging

import pytest


class TestRenderSettings:
    """Tests for RenderSettings."""

    def test_defaults(self):
        """Test the default settings."""
        from portaltrace.config import DEFAULT_MAX_DEPTH, RenderSettings

        settings = RenderSettings()
        assert (settings.width, settings.height) == (640, 480)
        assert settings.oversampling == 1
        assert settings.max_depth == DEFAULT_MAX_DEPTH == 10
        assert settings.workers is None
        assert settings.use_processes is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 0},
            {"height": -1},
            {"oversampling": 0},
            {"max_depth": -1},
            {"workers": 0},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        """Test validation of each field."""
        from portaltrace.config import RenderSettings

        with pytest.raises(ValueError):
            RenderSettings(**kwargs)

    def test_oversampled_size(self):
        """Test grid size with and without padding."""
        from portaltrace.config import RenderSettings

        settings = RenderSettings(width=320, height=240, oversampling=3)
        assert settings.oversampled_size() == (960, 720)
        assert settings.oversampled_size(padding=2) == (964, 724)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_and_handler(self):
        """Test that the package logger gets a console handler."""
        from portaltrace.logging_config import setup_logging

        logger = setup_logging("DEBUG", name="portaltrace.test_setup")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_calls_do_not_stack_handlers(self):
        """Test that a second call replaces the first handler."""
        from portaltrace.logging_config import setup_logging

        setup_logging("INFO", name="portaltrace.test_repeat")
        logger = setup_logging("WARNING", name="portaltrace.test_repeat")

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        """Test that an unrecognized level name means INFO."""
        from portaltrace.logging_config import setup_logging

        logger = setup_logging("LOUD", name="portaltrace.test_fallback")
        assert logger.level == logging.INFO
