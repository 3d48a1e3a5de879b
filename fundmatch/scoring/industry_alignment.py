"""
Industry Alignment Analyzer
fundmatch/scoring/industry_alignment.py

Scores how well the business's stated industry fits an opportunity (max 30).

Profile-only mode (no opportunity):
    industry unset  → 10 / none
    industry stated → 30 / strong   (clarity, not fit)

Opportunity-match mode:
    industry unset                     →  5 / none
    opportunity accepts all industries → 25 / moderate
    substring match either direction   → 30 / strong
    related-industry match             → 20 / moderate
    otherwise                          →  5 / weak
"""

from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

import structlog

from fundmatch.models.enumerations import MatchLevel
from fundmatch.models.opportunity import FundingOpportunity
from fundmatch.models.profile import BusinessProfile
from fundmatch.models.result import IndustryAlignment

logger = structlog.get_logger(__name__)

# Canonical category → keyword fragments of related industries
RELATED_INDUSTRIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "technology":    ("fintech", "software", "it", "digital", "tech"),
    "financial":     ("fintech", "banking", "insurance", "investment"),
    "manufacturing": ("automotive", "industrial", "production"),
    "healthcare":    ("medical", "pharmaceutical", "biotech", "health"),
})


def is_related_industry(profile_industry: str, target_industries: Sequence[str]) -> bool:
    """
    Best-effort relatedness between a profile industry and an allow-list.

    The profile belongs to a category when it contains one of that
    category's fragments. It is related to the opportunity when any target
    contains the category name or equals one of the same fragments.
    """
    industry = profile_industry.lower()
    targets = [t.lower().strip() for t in target_industries]

    for category, fragments in RELATED_INDUSTRIES.items():
        if not any(fragment in industry for fragment in fragments):
            continue
        if any(category in target or target in fragments for target in targets):
            return True
    return False


class IndustryAlignmentAnalyzer:
    """
    Score industry clarity (profile-only) or industry fit (opportunity match).

    Blank entries in the opportunity's industries list are ignored, so they
    never match as an empty substring; a list of only blanks accepts all
    industries.
    """

    def analyze(
        self,
        profile: BusinessProfile,
        opportunity: Optional[FundingOpportunity] = None,
    ) -> IndustryAlignment:
        industry = profile.company_info.industry_type if profile.company_info else None
        industry = industry.strip() if industry else ""

        if opportunity is None:
            if not industry:
                return IndustryAlignment(
                    score=10, match=MatchLevel.NONE,
                    details="Industry not specified in profile",
                )
            return IndustryAlignment(
                score=30, match=MatchLevel.STRONG,
                details=f"Industry clearly defined: {industry}",
            )

        if not industry:
            return IndustryAlignment(
                score=5, match=MatchLevel.NONE,
                details="Industry not specified in profile",
            )

        criteria = opportunity.eligibility_criteria
        targets = [t for t in criteria.industries if t.strip()] if criteria else []
        if not targets:
            return IndustryAlignment(
                score=25, match=MatchLevel.MODERATE,
                details="Opportunity accepts all industries",
            )

        profile_industry = industry.lower()
        direct = any(
            profile_industry in target.lower() or target.lower() in profile_industry
            for target in targets
        )

        if direct:
            result = IndustryAlignment(
                score=30, match=MatchLevel.STRONG,
                details=f"Strong industry alignment: {profile_industry}",
            )
        elif is_related_industry(profile_industry, targets):
            result = IndustryAlignment(
                score=20, match=MatchLevel.MODERATE,
                details=f"Related industry match: {profile_industry}",
            )
        else:
            result = IndustryAlignment(
                score=5, match=MatchLevel.WEAK,
                details=f"Industry mismatch: {profile_industry} not in target industries",
            )

        logger.debug(
            "industry_alignment_scored",
            industry=profile_industry,
            targets=targets,
            score=result.score,
            match=result.match.value,
        )
        return result
