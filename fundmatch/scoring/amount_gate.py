"""
Amount Eligibility Gate
fundmatch/scoring/amount_gate.py

Hard pre-check for opportunity-match analysis. A requested amount that is
not a positive number, or falls outside [min_investment, max_investment],
disqualifies the application before any dimension is scored.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

import structlog

from fundmatch.models.enumerations import (
    AnalysisMode,
    EligibilityStatus,
    MatchLevel,
    ReadinessLevel,
    RiskCategory,
    RiskSeverity,
)
from fundmatch.models.opportunity import ApplicationDraft, FundingOpportunity
from fundmatch.models.result import (
    CompatibilityResult,
    FinancialReadiness,
    IndustryAlignment,
    ProfileCompleteness,
    RiskFlag,
    StageCompatibility,
)
from fundmatch.scoring.utils import format_currency, parse_amount

logger = structlog.get_logger(__name__)

REJECTION_RECOMMENDATIONS = (
    "Review the opportunity investment range",
    "Consider adjusting your funding requirements",
    "Look for opportunities that match your funding needs",
)


@dataclass(frozen=True)
class AmountCheck:
    """Outcome of the amount gate."""
    eligible: bool
    requested_amount: Optional[Decimal]
    reason: Optional[str] = None


def check_amount(draft: ApplicationDraft, opportunity: FundingOpportunity) -> AmountCheck:
    """Validate the requested amount against the opportunity's investment range."""
    amount = parse_amount(draft.requested_amount)

    if amount is None or amount <= 0:
        return AmountCheck(False, amount, "Invalid funding amount specified")

    if amount < opportunity.min_investment:
        return AmountCheck(
            False, amount,
            f"Requested amount ({format_currency(amount)}) is below minimum investment "
            f"of {format_currency(opportunity.min_investment)}",
        )

    if amount > opportunity.max_investment:
        return AmountCheck(
            False, amount,
            f"Requested amount ({format_currency(amount)}) exceeds maximum investment "
            f"of {format_currency(opportunity.max_investment)}",
        )

    return AmountCheck(True, amount)


def build_rejection_result(
    check: AmountCheck,
    opportunity: FundingOpportunity,
    generated_at: datetime,
) -> CompatibilityResult:
    """All-zero, ineligible result for an amount that failed the gate."""
    reason = check.reason or "Invalid funding amount specified"

    logger.info(
        "amount_gate_rejected",
        opportunity_id=opportunity.id,
        requested_amount=None if check.requested_amount is None else str(check.requested_amount),
        min_investment=opportunity.min_investment,
        max_investment=opportunity.max_investment,
        reason=reason,
    )

    return CompatibilityResult(
        compatibility_score=0,
        eligibility_status=EligibilityStatus.INELIGIBLE,
        industry_alignment=IndustryAlignment(
            score=0, match=MatchLevel.NONE, details="Amount eligibility failed",
        ),
        stage_compatibility=StageCompatibility(
            score=0, match=MatchLevel.WEAK, details="Amount eligibility failed",
        ),
        financial_readiness=FinancialReadiness(
            score=0, level=ReadinessLevel.WEAK, details=reason,
        ),
        profile_completeness=ProfileCompleteness(score=0, percentage=0),
        strengths=[],
        improvement_areas=[
            f"Adjust funding amount to between {format_currency(opportunity.min_investment)} "
            f"and {format_currency(opportunity.max_investment)}"
        ],
        recommendations=list(REJECTION_RECOMMENDATIONS),
        risk_flags=[
            RiskFlag(
                category=RiskCategory.FINANCIAL,
                severity=RiskSeverity.HIGH,
                issue="Amount misalignment",
                impact=reason,
            )
        ],
        ready_to_proceed=False,
        analysis_mode=AnalysisMode.OPPORTUNITY_MATCH,
        generated_at=generated_at,
    )
