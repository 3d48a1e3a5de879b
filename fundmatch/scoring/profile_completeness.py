"""
Profile Completeness Analyzer
fundmatch/scoring/profile_completeness.py

Weighted completeness of the seven profile sections (max 20).

A section is complete only when every one of its required fields is filled.

    percentage = round(100 × completed_weight / total_weight)
    score      = max(0, round(20 × percentage / 100) − 3 × missing_critical)
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Tuple

import structlog

from fundmatch.models.profile import BusinessProfile
from fundmatch.models.result import ProfileCompleteness
from fundmatch.scoring.utils import is_filled, round_half_up

logger = structlog.get_logger(__name__)

MAX_SCORE = 20
CRITICAL_SECTION_PENALTY = 3


@dataclass(frozen=True)
class ProfileSection:
    """One weighted profile section and the fields that make it complete."""
    key: str                          # attribute on BusinessProfile
    name: str                         # display name used in feedback
    critical: bool
    weight: int
    required_fields: Tuple[str, ...]


PROFILE_SECTIONS: Tuple[ProfileSection, ...] = (
    ProfileSection("company_info", "Company Information", True, 4,
                   ("company_name", "registration_number", "industry_type")),
    ProfileSection("financial_profile", "Financial Profile", True, 4,
                   ("current_assets", "monthly_revenue")),
    ProfileSection("business_strategy", "Business Strategy", True, 3,
                   ("executive_summary", "mission_statement")),
    ProfileSection("business_assessment", "Business Assessment", False, 2,
                   ("business_model", "value_proposition")),
    ProfileSection("management_structure", "Management Structure", False, 2,
                   ("executive_team",)),
    ProfileSection("supporting_documents", "Supporting Documents", True, 3,
                   ("company_profile", "current_year_financials")),
    ProfileSection("swot_analysis", "SWOT Analysis", False, 2,
                   ("strengths", "weaknesses")),
)

TOTAL_WEIGHT = sum(section.weight for section in PROFILE_SECTIONS)


def is_section_complete(profile: BusinessProfile, section: ProfileSection) -> bool:
    """True when the section is present and all its required fields are filled."""
    data = getattr(profile, section.key)
    if data is None:
        return False
    return all(is_filled(getattr(data, field, None)) for field in section.required_fields)


class ProfileCompletenessAnalyzer:
    """Score how much of the funding profile has been completed."""

    def analyze(self, profile: BusinessProfile) -> ProfileCompleteness:
        completed_weight = 0
        missing_critical: List[str] = []
        missing_optional: List[str] = []

        for section in PROFILE_SECTIONS:
            if is_section_complete(profile, section):
                completed_weight += section.weight
            elif section.critical:
                missing_critical.append(section.name)
            else:
                missing_optional.append(section.name)

        percentage = round_half_up(Decimal(completed_weight) * 100 / Decimal(TOTAL_WEIGHT))
        score = round_half_up(Decimal(percentage) * MAX_SCORE / 100)
        score = max(0, score - CRITICAL_SECTION_PENALTY * len(missing_critical))

        logger.debug(
            "profile_completeness_scored",
            completed_weight=completed_weight,
            percentage=percentage,
            missing_critical=missing_critical,
            score=score,
        )

        return ProfileCompleteness(
            score=score,
            percentage=percentage,
            missing_critical_sections=missing_critical,
            missing_optional_sections=missing_optional,
        )
