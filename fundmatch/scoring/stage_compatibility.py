"""
Stage Compatibility Analyzer
fundmatch/scoring/stage_compatibility.py

Derives the business stage from age and revenue, then scores it against an
opportunity's target stages (max 25).

Stage derivation (evaluated in order, first match wins):
    years <= 2 or annual revenue < R500k         → startup
    years <= 5 and annual revenue < R5m          → growth
    annual revenue >= R5m                        → mature
    otherwise                                    → early-stage

Opportunity-match scoring:
    no target stages        → 20 / moderate
    exact match             → 25 / strong
    adjacent in progression → 15 / moderate
    otherwise               →  5 / weak
"""

from datetime import date
from typing import Optional, Sequence

import structlog

from fundmatch.models.enumerations import BusinessStage, MatchLevel
from fundmatch.models.opportunity import FundingOpportunity
from fundmatch.models.profile import BusinessProfile
from fundmatch.models.result import StageCompatibility
from fundmatch.scoring.utils import annual_revenue, years_in_operation

logger = structlog.get_logger(__name__)

STAGE_PROGRESSION = (
    BusinessStage.STARTUP,
    BusinessStage.EARLY_STAGE,
    BusinessStage.GROWTH,
    BusinessStage.MATURE,
)

STARTUP_REVENUE_CEILING = 500_000
MATURE_REVENUE_FLOOR = 5_000_000


def determine_business_stage(years: int, revenue: float) -> BusinessStage:
    """Classify a business by years in operation and annual revenue."""
    if years <= 2 or revenue < STARTUP_REVENUE_CEILING:
        return BusinessStage.STARTUP
    if years <= 5 and revenue < MATURE_REVENUE_FLOOR:
        return BusinessStage.GROWTH
    if revenue >= MATURE_REVENUE_FLOOR:
        return BusinessStage.MATURE
    return BusinessStage.EARLY_STAGE


def is_adjacent_stage(stage: BusinessStage, target_stages: Sequence[str]) -> bool:
    """True when a target stage is one step before or after `stage`."""
    index = STAGE_PROGRESSION.index(stage)
    neighbours = {
        STAGE_PROGRESSION[i].value
        for i in (index - 1, index + 1)
        if 0 <= i < len(STAGE_PROGRESSION)
    }
    return any(target.strip().lower() in neighbours for target in target_stages)


class StageCompatibilityAnalyzer:
    """
    Score business stage fit.

    Blank entries in the opportunity's business_stages list are ignored; a
    list of only blanks accepts all stages.
    """

    def analyze(
        self,
        profile: BusinessProfile,
        opportunity: Optional[FundingOpportunity] = None,
        today: Optional[date] = None,
    ) -> StageCompatibility:
        today = today or date.today()
        company = profile.company_info
        financial = profile.financial_profile

        years = years_in_operation(company.founding_year if company else None, today)
        revenue = annual_revenue(financial.monthly_revenue if financial else None)
        stage = determine_business_stage(years, revenue)

        logger.debug("business_stage_derived", stage=stage.value, years=years, annual_revenue=revenue)

        if opportunity is None:
            return StageCompatibility(
                score=25, match=MatchLevel.STRONG,
                details=f"Business stage: {stage.value} ({years} years in operation)",
            )

        criteria = opportunity.eligibility_criteria
        targets = [s for s in criteria.business_stages if s.strip()] if criteria else []

        if not targets:
            return StageCompatibility(
                score=20, match=MatchLevel.MODERATE,
                details="Opportunity accepts all business stages",
            )

        if any(target.strip().lower() == stage.value for target in targets):
            return StageCompatibility(
                score=25, match=MatchLevel.STRONG,
                details=f"Perfect stage match: {stage.value}",
            )

        if is_adjacent_stage(stage, targets):
            return StageCompatibility(
                score=15, match=MatchLevel.MODERATE,
                details=f"Adjacent stage compatibility: {stage.value}",
            )

        return StageCompatibility(
            score=5, match=MatchLevel.WEAK,
            details=f"Stage mismatch: {stage.value} not suitable for this opportunity",
        )
