"""
Core Package - SME Funding Compatibility Platform
fundmatch/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from fundmatch.core.exceptions import (
    AnalysisException,
    MissingApplicationDataException,
)
from fundmatch.core.logging import configure_logging

__all__ = [
    # Exceptions
    "AnalysisException",
    "MissingApplicationDataException",
    # Logging
    "configure_logging",
]
