# tests/test_config.py
"""Settings validation and engine wiring."""

import pytest
from pydantic import ValidationError

from fundmatch.config import Settings
from fundmatch.core.dependencies import get_scoring_engine
from fundmatch.core.logging import configure_logging


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.API_V1_PREFIX == "/api/v1"
        assert (s.ELIGIBLE_THRESHOLD, s.CONDITIONAL_THRESHOLD) == (70, 40)
        assert s.PROCEED_THRESHOLD == 60

    def test_thresholds_must_be_ordered(self):
        with pytest.raises(ValidationError, match="CONDITIONAL_THRESHOLD"):
            Settings(ELIGIBLE_THRESHOLD=50, CONDITIONAL_THRESHOLD=50)

    def test_no_debug_in_production(self):
        with pytest.raises(ValidationError, match="DEBUG must be False"):
            Settings(APP_ENV="production", DEBUG=True)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ELIGIBLE_THRESHOLD", "80")
        assert Settings().ELIGIBLE_THRESHOLD == 80


class TestWiring:

    def test_engine_uses_settings_thresholds(self):
        engine = get_scoring_engine()
        s = Settings()
        assert engine.eligible_threshold == s.ELIGIBLE_THRESHOLD
        assert engine.conditional_threshold == s.CONDITIONAL_THRESHOLD
        assert engine.proceed_threshold == s.PROCEED_THRESHOLD

    def test_engine_is_cached(self):
        assert get_scoring_engine() is get_scoring_engine()

    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_configure_logging(self, fmt):
        configure_logging(level="debug", fmt=fmt)
