"""Data models for profiles, opportunities and compatibility results."""

from fundmatch.models.enumerations import (
    AnalysisMode,
    BusinessStage,
    EligibilityStatus,
    MatchLevel,
    ReadinessLevel,
    RiskCategory,
    RiskSeverity,
    TaxComplianceStatus,
)
from fundmatch.models.opportunity import (
    ApplicationDraft,
    EligibilityCriteria,
    FundingOpportunity,
)
from fundmatch.models.profile import (
    BusinessAssessment,
    BusinessProfile,
    BusinessStrategy,
    CompanyInfo,
    FileUpload,
    FinancialProfile,
    ManagementStructure,
    SupportingDocuments,
    SwotAnalysis,
)
from fundmatch.models.result import (
    CompatibilityResult,
    ErrorResponse,
    FinancialReadiness,
    IndustryAlignment,
    Insights,
    ProfileCompleteness,
    RiskFlag,
    StageCompatibility,
)

__all__ = [
    "AnalysisMode",
    "BusinessStage",
    "EligibilityStatus",
    "MatchLevel",
    "ReadinessLevel",
    "RiskCategory",
    "RiskSeverity",
    "TaxComplianceStatus",
    "ApplicationDraft",
    "EligibilityCriteria",
    "FundingOpportunity",
    "BusinessAssessment",
    "BusinessProfile",
    "BusinessStrategy",
    "CompanyInfo",
    "FileUpload",
    "FinancialProfile",
    "ManagementStructure",
    "SupportingDocuments",
    "SwotAnalysis",
    "CompatibilityResult",
    "ErrorResponse",
    "FinancialReadiness",
    "IndustryAlignment",
    "Insights",
    "ProfileCompleteness",
    "RiskFlag",
    "StageCompatibility",
]
