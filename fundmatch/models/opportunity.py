"""
Funding Opportunity Models - SME Funding Compatibility Platform
fundmatch/models/opportunity.py
"""

from typing import List, Optional, Union

from pydantic import ConfigDict, Field, model_validator

from fundmatch.models.profile import ProfileModel


class EligibilityCriteria(ProfileModel):
    """
    Funder-defined eligibility rules.

    An empty list means the opportunity accepts every value.
    """

    industries: List[str] = Field(default_factory=list)
    business_stages: List[str] = Field(default_factory=list)
    min_revenue: Optional[float] = Field(default=None, ge=0, description="Annual, ZAR")
    max_revenue: Optional[float] = Field(default=None, ge=0, description="Annual, ZAR")


class FundingOpportunity(ProfileModel):
    """A funding offer with an investment range in ZAR."""

    id: Optional[str] = None
    title: Optional[str] = None
    funding_type: Optional[str] = None
    min_investment: float = Field(..., gt=0)
    max_investment: float = Field(..., gt=0)
    currency: str = "ZAR"
    eligibility_criteria: Optional[EligibilityCriteria] = None

    @model_validator(mode="after")
    def validate_investment_range(self):
        """Ensure max_investment >= min_investment."""
        if self.max_investment < self.min_investment:
            raise ValueError("max_investment must be >= min_investment")
        return self


class ApplicationDraft(ProfileModel):
    """
    Application being prepared for one opportunity.

    requested_amount is kept as supplied; the amount gate decides whether it
    is a usable number.
    """

    # NaN and infinite amounts reach the amount gate and are rejected there
    model_config = ConfigDict(allow_inf_nan=True)

    opportunity_id: Optional[str] = None
    requested_amount: Union[str, int, float, None] = None
    purpose_statement: Optional[str] = None
    use_of_funds: Optional[str] = None
    timeline: Optional[str] = None
    opportunity_alignment: Optional[str] = None
