# tests/conftest.py

"""
Pytest Fixtures - Shared profiles, opportunities and clients for all tests

FIXED CLOCK:
- All engine fixtures run at 2025-06-15T12:00:00Z, so founding year 2015
  means 10 years in operation.
"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from fundmatch.main import app
from fundmatch.models import (
    ApplicationDraft,
    BusinessProfile,
    FundingOpportunity,
)
from fundmatch.scoring.engine import CompatibilityEngine


FIXED_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def engine():
    """Engine with a fixed clock for reproducible results."""
    return CompatibilityEngine(clock=lambda: FIXED_NOW)


# =============================================================================
# PROFILE FIXTURES (camelCase, as sent by the UI)
# =============================================================================

@pytest.fixture
def complete_profile_data():
    """Fully completed profile: mature fintech, R6m annual revenue, compliant."""
    return {
        "companyInfo": {
            "companyName": "Lulama Payments (Pty) Ltd",
            "registrationNumber": "2015/123456/07",
            "industryType": "fintech",
            "foundingYear": 2015,
            "taxComplianceStatus": "compliant",
        },
        "financialProfile": {
            "currentAssets": 2500000,
            "monthlyRevenue": 500000,
            "profitMargin": 15,
            "debtToEquity": 0.4,
            "currentRatio": 1.8,
        },
        "businessStrategy": {
            "executiveSummary": "Payments infrastructure for township retailers.",
            "missionStatement": "Make every rand move faster.",
        },
        "businessAssessment": {
            "businessModel": "Transaction fees",
            "valueProposition": "Same-day settlement",
        },
        "managementStructure": {
            "executiveTeam": [{"fullName": "Thandi Mokoena", "position": "CEO"}],
        },
        "supportingDocuments": {
            "companyProfile": {"fileName": "cipc.pdf"},
            "currentYearFinancials": {"fileName": "afs_2024.pdf"},
            "priorYearFinancialYear1": {"fileName": "afs_2023.pdf"},
        },
        "swotAnalysis": {
            "strengths": ["Licensed PSP"],
            "weaknesses": ["Single bank partner"],
        },
    }


@pytest.fixture
def complete_profile(complete_profile_data):
    return BusinessProfile.model_validate(complete_profile_data)


@pytest.fixture
def empty_profile():
    """Profile with no sections at all."""
    return BusinessProfile()


# =============================================================================
# OPPORTUNITY / APPLICATION FIXTURES
# =============================================================================

@pytest.fixture
def opportunity_data():
    return {
        "id": "opp-001",
        "title": "SME Growth Fund",
        "minInvestment": 100000,
        "maxInvestment": 500000,
        "eligibilityCriteria": {
            "industries": ["financial"],
            "businessStages": ["mature"],
        },
    }


@pytest.fixture
def opportunity(opportunity_data):
    return FundingOpportunity.model_validate(opportunity_data)


@pytest.fixture
def open_opportunity():
    """Opportunity with no eligibility criteria (accepts everyone)."""
    return FundingOpportunity(min_investment=100000, max_investment=500000)


@pytest.fixture
def valid_application():
    return ApplicationDraft(requested_amount="250000")
