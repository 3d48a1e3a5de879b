"""
Financial Readiness Analyzer
fundmatch/scoring/financial_readiness.py

Scores revenue, financial documentation and profitability (max 25).

    revenue:        > R5m +15 | > R1m +10 | > 0 +5 | else 0
    documentation:  current + prior year +8 | current only +5 | else 0
    health:         margin > 10% +2 | margin > 0 +1 | else 0
    opportunity:    below min revenue −10, above max revenue −5 (each floored at 0)

Level is taken from the running total before the cap:
    >= 20 strong, >= 10 moderate, else weak.
"""

from typing import List, Optional

import structlog

from fundmatch.models.enumerations import ReadinessLevel
from fundmatch.models.opportunity import FundingOpportunity
from fundmatch.models.profile import BusinessProfile, SupportingDocuments
from fundmatch.models.result import FinancialReadiness
from fundmatch.scoring.utils import annual_revenue, format_currency, is_filled

logger = structlog.get_logger(__name__)

MAX_SCORE = 25
DETAIL_SEPARATOR = " • "


def has_current_financials(docs: Optional[SupportingDocuments]) -> bool:
    if docs is None:
        return False
    return is_filled(docs.current_year_financials) or bool(docs.audited_financials)


def has_historical_financials(docs: Optional[SupportingDocuments]) -> bool:
    if docs is None:
        return False
    return is_filled(docs.prior_year_financial_year1) or is_filled(docs.prior_year_financial_year2)


class FinancialReadinessAnalyzer:
    """Score financial readiness from revenue, documents and margins."""

    def analyze(
        self,
        profile: BusinessProfile,
        opportunity: Optional[FundingOpportunity] = None,
    ) -> FinancialReadiness:
        financial = profile.financial_profile
        docs = profile.supporting_documents
        revenue = annual_revenue(financial.monthly_revenue if financial else None)
        profit_margin = (financial.profit_margin if financial else None) or 0

        total = 0
        details: List[str] = []

        # Revenue
        if revenue > 5_000_000:
            total += 15
            details.append(f"Strong revenue: {format_currency(revenue)}")
        elif revenue > 1_000_000:
            total += 10
            details.append(f"Moderate revenue: {format_currency(revenue)}")
        elif revenue > 0:
            total += 5
            details.append(f"Early revenue: {format_currency(revenue)}")
        else:
            details.append("Revenue not disclosed or pre-revenue stage")

        # Documentation
        current = has_current_financials(docs)
        if current and has_historical_financials(docs):
            total += 8
            details.append("Complete financial records")
        elif current:
            total += 5
            details.append("Current financials available")
        else:
            details.append("Financial documentation missing")

        # Health
        if profit_margin > 10:
            total += 2
            details.append("Profitable operations")
        elif profit_margin > 0:
            total += 1
            details.append("Break-even operations")

        # Opportunity revenue bounds
        criteria = opportunity.eligibility_criteria if opportunity else None
        if criteria is not None:
            if criteria.min_revenue and revenue < criteria.min_revenue:
                total = max(0, total - 10)
                details.append(
                    f"Below minimum revenue requirement ({format_currency(criteria.min_revenue)})"
                )
            if criteria.max_revenue and revenue > criteria.max_revenue:
                total = max(0, total - 5)
                details.append("Above maximum revenue threshold")

        if total >= 20:
            level = ReadinessLevel.STRONG
        elif total >= 10:
            level = ReadinessLevel.MODERATE
        else:
            level = ReadinessLevel.WEAK

        logger.debug(
            "financial_readiness_scored",
            annual_revenue=revenue,
            uncapped_score=total,
            level=level.value,
        )

        return FinancialReadiness(
            score=min(MAX_SCORE, total),
            level=level,
            details=DETAIL_SEPARATOR.join(details),
        )
