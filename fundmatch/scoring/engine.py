# fundmatch/scoring/engine.py
"""
Compatibility Scoring Engine
------------------------------
Scores a business profile's funding readiness, either standalone
(profile_only) or against one funding opportunity (opportunity_match).

Pipeline:
    1. Amount gate (opportunity_match only) - short-circuits to score 0
    2. Four analyzers:
           industry alignment    0-30
           stage compatibility   0-25
           financial readiness   0-25
           profile completeness  0-20
    3. compatibility_score = round(Σ analyzer scores)
    4. eligibility: >= 70 eligible, >= 40 conditional, else ineligible
    5. Insight synthesis from the four analyzer results

The engine is a pure computation: no I/O and no shared mutable state. The
only non-input it reads is the clock, which is injectable.
"""
from datetime import datetime, timezone
from typing import Callable, Optional

import structlog

from fundmatch.core.exceptions import MissingApplicationDataException
from fundmatch.models.enumerations import AnalysisMode, EligibilityStatus
from fundmatch.models.opportunity import ApplicationDraft, FundingOpportunity
from fundmatch.models.profile import BusinessProfile
from fundmatch.models.result import CompatibilityResult
from fundmatch.scoring.amount_gate import build_rejection_result, check_amount
from fundmatch.scoring.financial_readiness import FinancialReadinessAnalyzer
from fundmatch.scoring.industry_alignment import IndustryAlignmentAnalyzer
from fundmatch.scoring.insights import generate_insights
from fundmatch.scoring.profile_completeness import ProfileCompletenessAnalyzer
from fundmatch.scoring.stage_compatibility import StageCompatibilityAnalyzer
from fundmatch.scoring.utils import round_half_up

logger = structlog.get_logger(__name__)

ELIGIBLE_THRESHOLD = 70
CONDITIONAL_THRESHOLD = 40
PROCEED_THRESHOLD = 60


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def classify_eligibility(
    score: int,
    eligible_threshold: int = ELIGIBLE_THRESHOLD,
    conditional_threshold: int = CONDITIONAL_THRESHOLD,
) -> EligibilityStatus:
    """Map a compatibility score to its eligibility band."""
    if score >= eligible_threshold:
        return EligibilityStatus.ELIGIBLE
    if score >= conditional_threshold:
        return EligibilityStatus.CONDITIONAL
    return EligibilityStatus.INELIGIBLE


class CompatibilityEngine:
    """Business-rules compatibility scoring for SME funding applications."""

    def __init__(
        self,
        eligible_threshold: int = ELIGIBLE_THRESHOLD,
        conditional_threshold: int = CONDITIONAL_THRESHOLD,
        proceed_threshold: int = PROCEED_THRESHOLD,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            eligible_threshold: Minimum score classified as eligible.
            conditional_threshold: Minimum score classified as conditional.
            proceed_threshold: Minimum score at which ready_to_proceed is set.
            clock: Source of generated_at and of the current year used for
                   business age. Inject a fixed clock for reproducible results.
        """
        if conditional_threshold >= eligible_threshold:
            raise ValueError("conditional_threshold must be below eligible_threshold")
        self.eligible_threshold = eligible_threshold
        self.conditional_threshold = conditional_threshold
        self.proceed_threshold = proceed_threshold
        self.clock = clock

        self.industry_analyzer = IndustryAlignmentAnalyzer()
        self.stage_analyzer = StageCompatibilityAnalyzer()
        self.financial_analyzer = FinancialReadinessAnalyzer()
        self.completeness_analyzer = ProfileCompletenessAnalyzer()

    # -----------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------

    def analyze_profile(self, profile: BusinessProfile) -> CompatibilityResult:
        """Assess funding readiness of a profile on its own."""
        return self._analyze(profile, None, self.clock())

    def analyze_application(
        self,
        profile: BusinessProfile,
        opportunity: FundingOpportunity,
        application: Optional[ApplicationDraft],
    ) -> CompatibilityResult:
        """
        Assess an application against a specific opportunity.

        Raises:
            MissingApplicationDataException: if no application draft is given.
        """
        if application is None:
            raise MissingApplicationDataException(opportunity.id or "")

        generated_at = self.clock()
        check = check_amount(application, opportunity)
        if not check.eligible:
            return build_rejection_result(check, opportunity, generated_at)

        return self._analyze(profile, opportunity, generated_at)

    # -----------------------------------------------------------------
    # Pipeline
    # -----------------------------------------------------------------

    def _analyze(
        self,
        profile: BusinessProfile,
        opportunity: Optional[FundingOpportunity],
        generated_at: datetime,
    ) -> CompatibilityResult:
        industry = self.industry_analyzer.analyze(profile, opportunity)
        stage = self.stage_analyzer.analyze(profile, opportunity, today=generated_at.date())
        financial = self.financial_analyzer.analyze(profile, opportunity)
        completeness = self.completeness_analyzer.analyze(profile)

        score = round_half_up(
            industry.score + stage.score + financial.score + completeness.score
        )
        status = classify_eligibility(
            score, self.eligible_threshold, self.conditional_threshold
        )
        insights = generate_insights(
            profile, opportunity, industry, stage, financial, completeness
        )
        mode = AnalysisMode.OPPORTUNITY_MATCH if opportunity else AnalysisMode.PROFILE_ONLY

        logger.info(
            "compatibility_analyzed",
            analysis_mode=mode.value,
            opportunity_id=opportunity.id if opportunity else None,
            industry_score=industry.score,
            stage_score=stage.score,
            financial_score=financial.score,
            completeness_score=completeness.score,
            compatibility_score=score,
            eligibility_status=status.value,
            risk_flags=len(insights.risk_flags),
        )

        return CompatibilityResult(
            compatibility_score=score,
            eligibility_status=status,
            industry_alignment=industry,
            stage_compatibility=stage,
            financial_readiness=financial,
            profile_completeness=completeness,
            strengths=insights.strengths,
            improvement_areas=insights.improvement_areas,
            recommendations=insights.recommendations,
            risk_flags=insights.risk_flags,
            ready_to_proceed=score >= self.proceed_threshold,
            analysis_mode=mode,
            generated_at=generated_at,
        )
