"""
Business Profile Models - SME Funding Compatibility Platform
fundmatch/models/profile.py

Snapshot of one SME's funding-readiness data as captured by the profile
wizard. Every field is optional: a profile is usually partially complete,
and incompleteness is scored rather than rejected.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProfileModel(BaseModel):
    """
    Base for all profile records.

    Accepts the UI's camelCase JSON and exposes snake_case attributes.
    Numeric fields must be finite.
    Instances are immutable.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        allow_inf_nan=False,
    )


class FileUpload(ProfileModel):
    """Reference to an uploaded document. Only its presence is scored."""

    id: Optional[str] = None
    file_name: Optional[str] = None
    original_name: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
    file_type: Optional[str] = None
    upload_date: Optional[datetime] = None
    storage_url: Optional[str] = None


class CompanyInfo(ProfileModel):
    company_name: Optional[str] = None
    registration_number: Optional[str] = None
    vat_number: Optional[str] = None
    industry_type: Optional[str] = Field(
        default=None,
        description="Free-text industry classification, e.g. 'fintech'"
    )
    business_activity: Optional[str] = None
    founding_year: Optional[int] = None
    operational_years: Optional[int] = None
    company_type: Optional[str] = None
    ownership: List[Dict[str, Any]] = Field(default_factory=list)
    employee_count: Optional[str] = None
    registered_address: Optional[Dict[str, Any]] = None
    operational_address: Optional[Dict[str, Any]] = None
    contact_person: Optional[Dict[str, Any]] = None
    tax_compliance_status: Optional[str] = Field(
        default=None,
        description="compliant | outstanding | under_review"
    )
    bbbee_level: Optional[str] = None
    regulatory_licenses: List[str] = Field(default_factory=list)


class FinancialProfile(ProfileModel):
    # Historical performance
    historical_financials: List[Dict[str, Any]] = Field(default_factory=list)

    # Current position
    current_assets: Optional[float] = None
    current_liabilities: Optional[float] = None
    net_worth: Optional[float] = None
    monthly_revenue: Optional[float] = Field(default=None, description="ZAR per month")
    monthly_costs: Optional[float] = None
    cash_flow: Optional[float] = None

    # Projections
    projected_revenue: List[Dict[str, Any]] = Field(default_factory=list)
    projected_profitability: List[Dict[str, Any]] = Field(default_factory=list)
    cash_flow_projections: List[Dict[str, Any]] = Field(default_factory=list)

    # Ratios
    profit_margin: Optional[float] = Field(default=None, description="Percent, e.g. 12.5")
    debt_to_equity: Optional[float] = None
    current_ratio: Optional[float] = None
    return_on_assets: Optional[float] = None

    # Banking
    primary_bank: Optional[str] = None
    banking_history: Optional[float] = None
    credit_facilities: List[Dict[str, Any]] = Field(default_factory=list)
    credit_rating: Optional[str] = None


class BusinessStrategy(ProfileModel):
    executive_summary: Optional[str] = None
    mission_statement: Optional[str] = None
    vision_statement: Optional[str] = None
    strategic_objectives: List[str] = Field(default_factory=list)

    market_analysis: Optional[str] = None
    competitive_strategy: Optional[str] = None
    pricing_strategy: Optional[str] = None
    marketing_strategy: Optional[str] = None

    expansion_plans: Optional[str] = None
    product_development: Optional[str] = None
    market_entry: Optional[str] = None
    scaling_strategy: Optional[str] = None

    revenue_projections: List[Dict[str, Any]] = Field(default_factory=list)
    profitability_timeline: Optional[str] = None
    break_even_analysis: Optional[str] = None
    return_on_investment: Optional[str] = None

    funding_requirements: Optional[Dict[str, Any]] = None
    use_of_funds: Optional[str] = None
    repayment_strategy: Optional[str] = None
    exit_strategy: Optional[str] = None


class BusinessAssessment(ProfileModel):
    business_model: Optional[str] = None
    value_proposition: Optional[str] = None
    target_markets: List[str] = Field(default_factory=list)
    customer_segments: Optional[str] = None

    market_size: Optional[str] = None
    competitive_position: Optional[str] = None
    market_share: Optional[float] = None
    growth_rate: Optional[float] = None

    operational_capacity: Optional[str] = None
    supply_chain: Optional[str] = None
    technology_use: Optional[str] = None
    quality_standards: Optional[str] = None

    key_performance_indicators: List[Dict[str, Any]] = Field(default_factory=list)
    sales_channels: List[str] = Field(default_factory=list)
    customer_retention: Optional[float] = None

    has_succession_plan: Optional[bool] = None
    succession_plan_details: Optional[str] = None


class ManagementStructure(ProfileModel):
    executive_team: List[Dict[str, Any]] = Field(default_factory=list)
    management_team: List[Dict[str, Any]] = Field(default_factory=list)
    board_of_directors: List[Dict[str, Any]] = Field(default_factory=list)

    governance_structure: Optional[str] = None
    decision_making_process: Optional[str] = None
    reporting_structure: Optional[str] = None

    advisors: List[Dict[str, Any]] = Field(default_factory=list)
    consultants: List[Dict[str, Any]] = Field(default_factory=list)


class SupportingDocuments(ProfileModel):
    # Company documents
    company_profile: Optional[FileUpload] = None
    company_registration_document: Optional[FileUpload] = None
    tax_pin: Optional[FileUpload] = None
    bee_affidavit: Optional[FileUpload] = None
    business_plan: Optional[FileUpload] = None
    shareholder_register: Optional[FileUpload] = None
    funding_application_request: Optional[FileUpload] = None
    pitch_deck: Optional[FileUpload] = None

    # Financial documents
    current_year_financials: Optional[FileUpload] = None
    prior_year_financial_year1: Optional[FileUpload] = None
    prior_year_financial_year2: Optional[FileUpload] = None
    asset_register: Optional[FileUpload] = None
    financial_projections: Optional[FileUpload] = None
    sales_pipeline: Optional[FileUpload] = None

    # Additional documents
    letter_of_intent: Optional[FileUpload] = None
    quotations: Optional[FileUpload] = None
    mou_or_sale_agreements: Optional[FileUpload] = None
    other: Optional[FileUpload] = None

    # Multi-file uploads
    audited_financials: List[FileUpload] = Field(default_factory=list)
    management_accounts: List[FileUpload] = Field(default_factory=list)
    bank_statements: List[FileUpload] = Field(default_factory=list)


class SwotAnalysis(ProfileModel):
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)

    strategic_priorities: List[str] = Field(default_factory=list)
    risk_mitigation: List[str] = Field(default_factory=list)
    competitive_advantages: List[str] = Field(default_factory=list)


class BusinessProfile(ProfileModel):
    """
    Funding-readiness profile of one SME.

    Each section is either supplied or None.
    """

    company_info: Optional[CompanyInfo] = None
    financial_profile: Optional[FinancialProfile] = None
    business_strategy: Optional[BusinessStrategy] = None
    business_assessment: Optional[BusinessAssessment] = None
    management_structure: Optional[ManagementStructure] = None
    supporting_documents: Optional[SupportingDocuments] = None
    swot_analysis: Optional[SwotAnalysis] = None
