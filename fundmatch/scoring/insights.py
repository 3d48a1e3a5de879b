"""
Insight Synthesis
fundmatch/scoring/insights.py

Deterministic rules turning the four dimension results into strengths,
improvement areas, recommendations and risk flags.

Strength thresholds: industry >= 20, stage >= 20, financial >= 15,
completeness >= 15.
"""

from typing import List, Optional

from fundmatch.models.enumerations import RiskCategory, RiskSeverity, TaxComplianceStatus
from fundmatch.models.opportunity import FundingOpportunity
from fundmatch.models.profile import BusinessProfile
from fundmatch.models.result import (
    FinancialReadiness,
    IndustryAlignment,
    Insights,
    ProfileCompleteness,
    RiskFlag,
    StageCompatibility,
)

INDUSTRY_STRENGTH = 20
STAGE_STRENGTH = 20
FINANCIAL_STRENGTH = 15
COMPLETENESS_STRENGTH = 15

WEAK_FINANCIAL = 10
WEAK_INDUSTRY = 15
WEAK_STAGE = 15


def generate_insights(
    profile: BusinessProfile,
    opportunity: Optional[FundingOpportunity],
    industry: IndustryAlignment,
    stage: StageCompatibility,
    financial: FinancialReadiness,
    completeness: ProfileCompleteness,
) -> Insights:
    strengths: List[str] = []
    improvement_areas: List[str] = []
    recommendations: List[str] = []
    risk_flags: List[RiskFlag] = []

    # Strengths
    if industry.score >= INDUSTRY_STRENGTH:
        strengths.append(f"Strong industry alignment: {industry.details}")
    if stage.score >= STAGE_STRENGTH:
        strengths.append(f"Business stage well-suited for this type of funding: {stage.details}")
    if financial.score >= FINANCIAL_STRENGTH:
        strengths.append(f"Solid financial foundation with documented performance: {financial.details}")
    if completeness.score >= COMPLETENESS_STRENGTH:
        strengths.append(
            f"Comprehensive business profile demonstrates preparation "
            f"({completeness.percentage}% complete)"
        )

    # Gaps
    if completeness.missing_critical_sections:
        improvement_areas.append(
            f"Complete critical sections: {', '.join(completeness.missing_critical_sections)}"
        )
        recommendations.append(
            "Focus on completing critical profile sections first for better funding readiness"
        )

    if financial.score < WEAK_FINANCIAL:
        improvement_areas.append("Strengthen financial documentation and performance metrics")
        recommendations.append("Prepare comprehensive financial statements and projections")
        risk_flags.append(RiskFlag(
            category=RiskCategory.FINANCIAL,
            severity=RiskSeverity.MEDIUM,
            issue="Limited financial documentation",
            impact="May require additional due diligence or affect funding terms",
        ))

    if opportunity is not None and industry.score < WEAK_INDUSTRY:
        improvement_areas.append("Consider opportunities that better align with your industry")
        recommendations.append("Look for funders specializing in your industry sector")

    # General guidance
    if opportunity is not None:
        recommendations.append("Review opportunity-specific requirements thoroughly")
        if stage.score < WEAK_STAGE:
            recommendations.append("Consider if your business stage aligns with funder expectations")
    else:
        recommendations.append("Complete any missing profile sections to improve funding readiness")
        recommendations.append("Consider obtaining professional financial projections if not available")

    # Compliance
    tax_status = profile.company_info.tax_compliance_status if profile.company_info else None
    if tax_status != TaxComplianceStatus.COMPLIANT.value:
        risk_flags.append(RiskFlag(
            category=RiskCategory.COMPLIANCE,
            severity=RiskSeverity.HIGH,
            issue="Tax compliance status unclear",
            impact="Essential for most funding applications",
        ))

    return Insights(
        strengths=strengths,
        improvement_areas=improvement_areas,
        recommendations=recommendations,
        risk_flags=risk_flags,
    )
