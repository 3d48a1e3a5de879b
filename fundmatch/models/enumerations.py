from enum import Enum

class EligibilityStatus(str, Enum):
    ELIGIBLE = "eligible"
    CONDITIONAL = "conditional"
    INELIGIBLE = "ineligible"

class AnalysisMode(str, Enum):
    PROFILE_ONLY = "profile_only"            # Readiness of the profile on its own
    OPPORTUNITY_MATCH = "opportunity_match"  # Fit against one funding opportunity

class MatchLevel(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    NONE = "none"

class ReadinessLevel(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"

class BusinessStage(str, Enum):
    STARTUP = "startup"
    EARLY_STAGE = "early-stage"
    GROWTH = "growth"
    MATURE = "mature"

class RiskCategory(str, Enum):
    FINANCIAL = "financial"
    OPERATIONAL = "operational"
    COMPLIANCE = "compliance"
    COMPLETENESS = "completeness"

class RiskSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class TaxComplianceStatus(str, Enum):
    COMPLIANT = "compliant"
    OUTSTANDING = "outstanding"
    UNDER_REVIEW = "under_review"
