"""
Custom Exceptions - SME Funding Compatibility Platform
fundmatch/core/exceptions.py

Raised for malformed analysis requests. Business-rule rejections (such as a
requested amount outside the investment range) are results, not exceptions.
"""


class AnalysisException(Exception):
    """Base exception for compatibility analysis requests."""

    pass


class MissingApplicationDataException(AnalysisException):
    """Opportunity-match analysis requested without application data."""

    def __init__(self, opportunity_id: str = ""):
        self.opportunity_id = opportunity_id
        target = f" for opportunity {opportunity_id}" if opportunity_id else ""
        super().__init__(f"Application data is required to analyze an application{target}")
