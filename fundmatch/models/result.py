"""
Compatibility Result Models - SME Funding Compatibility Platform
fundmatch/models/result.py

Output of the scoring engine. Created fresh on every analysis and never
stored by the engine.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from fundmatch.models.enumerations import (
    AnalysisMode,
    EligibilityStatus,
    MatchLevel,
    ReadinessLevel,
    RiskCategory,
    RiskSeverity,
)


class ResultModel(BaseModel):
    """Immutable result record serialized as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class IndustryAlignment(ResultModel):
    MAX_SCORE: ClassVar[int] = 30

    score: int = Field(..., ge=0, le=30)
    match: MatchLevel
    details: str

    @computed_field
    @property
    def max_score(self) -> int:
        return self.MAX_SCORE


class StageCompatibility(ResultModel):
    MAX_SCORE: ClassVar[int] = 25

    score: int = Field(..., ge=0, le=25)
    match: MatchLevel
    details: str

    @computed_field
    @property
    def max_score(self) -> int:
        return self.MAX_SCORE


class FinancialReadiness(ResultModel):
    MAX_SCORE: ClassVar[int] = 25

    score: int = Field(..., ge=0, le=25)
    level: ReadinessLevel
    details: str

    @computed_field
    @property
    def max_score(self) -> int:
        return self.MAX_SCORE


class ProfileCompleteness(ResultModel):
    MAX_SCORE: ClassVar[int] = 20

    score: int = Field(..., ge=0, le=20)
    percentage: int = Field(..., ge=0, le=100)
    missing_critical_sections: List[str] = Field(default_factory=list)
    missing_optional_sections: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def max_score(self) -> int:
        return self.MAX_SCORE


class RiskFlag(ResultModel):
    category: RiskCategory
    severity: RiskSeverity
    issue: str
    impact: str


class Insights(ResultModel):
    """Feedback lists derived from the four dimension results."""

    strengths: List[str] = Field(default_factory=list)
    improvement_areas: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    risk_flags: List[RiskFlag] = Field(default_factory=list)


class CompatibilityResult(ResultModel):
    """
    Full compatibility analysis of a business profile.

    compatibility_score is the sum of the four dimension scores (max 100).
    """

    compatibility_score: int = Field(..., ge=0, le=100)
    eligibility_status: EligibilityStatus

    industry_alignment: IndustryAlignment
    stage_compatibility: StageCompatibility
    financial_readiness: FinancialReadiness
    profile_completeness: ProfileCompleteness

    strengths: List[str] = Field(default_factory=list)
    improvement_areas: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    risk_flags: List[RiskFlag] = Field(default_factory=list)

    ready_to_proceed: bool = Field(
        default=False,
        description="Score is high enough to continue the application as-is"
    )

    analysis_mode: AnalysisMode
    generated_at: datetime


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error occurrence timestamp")
