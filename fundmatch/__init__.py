"""
SME Funding Compatibility Platform

Business-rules scoring of SME funding readiness, standalone or against a
specific funding opportunity.
"""

__version__ = "1.0.0"
