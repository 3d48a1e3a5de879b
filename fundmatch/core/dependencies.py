"""
Dependencies - SME Funding Compatibility Platform
fundmatch/core/dependencies.py

FastAPI dependency injection for the scoring engine.
"""

from functools import lru_cache

from fundmatch.config import get_settings
from fundmatch.scoring.engine import CompatibilityEngine


@lru_cache()
def get_scoring_engine() -> CompatibilityEngine:
    """Get cached CompatibilityEngine configured from settings."""
    settings = get_settings()
    return CompatibilityEngine(
        eligible_threshold=settings.ELIGIBLE_THRESHOLD,
        conditional_threshold=settings.CONDITIONAL_THRESHOLD,
        proceed_threshold=settings.PROCEED_THRESHOLD,
    )
