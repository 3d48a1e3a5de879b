# tests/test_api.py

"""
API Endpoint Tests - Tests for all FastAPI endpoints
"""

import pytest
from fastapi import status


PROFILE_URL = "/api/v1/analysis/profile"
APPLICATION_URL = "/api/v1/analysis/application"



# ROOT AND HEALTH ENDPOINT TESTS


class TestRootEndpoint:
    """Tests for GET / endpoint."""

    def test_root_describes_service(self, client):
        response = client.get("/")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "running"
        assert data["docs"]["swagger"] == "/docs"
        assert "version" in data


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_ok(self, client):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "version" in data



# PROFILE ANALYSIS ENDPOINT TESTS


class TestProfileAnalysisEndpoint:
    """Tests for POST /api/v1/analysis/profile endpoint."""

    def test_complete_profile(self, client, complete_profile_data):
        response = client.post(PROFILE_URL, json={"profile": complete_profile_data})
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["analysisMode"] == "profile_only"
        assert data["industryAlignment"]["score"] == 30
        assert data["financialReadiness"]["level"] == "strong"
        assert data["profileCompleteness"]["percentage"] == 100
        assert data["compatibilityScore"] == 100
        assert data["eligibilityStatus"] == "eligible"
        assert data["readyToProceed"] is True

    def test_response_uses_camel_case(self, client, complete_profile_data):
        data = client.post(PROFILE_URL, json={"profile": complete_profile_data}).json()

        assert "compatibilityScore" in data
        assert "generatedAt" in data
        assert "missingCriticalSections" in data["profileCompleteness"]
        assert "compatibility_score" not in data

    def test_empty_profile(self, client):
        response = client.post(PROFILE_URL, json={"profile": {}})
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["eligibilityStatus"] == "ineligible"
        assert data["industryAlignment"]["score"] == 10
        assert data["industryAlignment"]["match"] == "none"
        assert {flag["category"] for flag in data["riskFlags"]} == {"financial", "compliance"}

    def test_missing_profile(self, client):
        response = client.post(PROFILE_URL, json={})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "Field 'profile' is required"
        assert data["details"] == {"field": "profile", "type": "missing"}

    def test_wrong_type_rejected(self, client):
        response = client.post(
            PROFILE_URL,
            json={"profile": {"financialProfile": {"monthlyRevenue": "lots"}}},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["details"]["field"] == "profile.financialProfile.monthlyRevenue"

    def test_non_finite_revenue_rejected(self, client):
        response = client.post(
            PROFILE_URL,
            content='{"profile": {"financialProfile": {"monthlyRevenue": 1e309}}}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["details"] == {
            "field": "profile.financialProfile.monthlyRevenue",
            "type": "finite_number",
        }
        assert data["message"] == (
            "Field 'profile.financialProfile.monthlyRevenue' must be a finite number"
        )

    def test_malformed_json(self, client):
        response = client.post(
            PROFILE_URL,
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "INVALID_REQUEST"



# APPLICATION ANALYSIS ENDPOINT TESTS


class TestApplicationAnalysisEndpoint:
    """Tests for POST /api/v1/analysis/application endpoint."""

    def test_matching_application(self, client, complete_profile_data, opportunity_data):
        response = client.post(APPLICATION_URL, json={
            "profile": complete_profile_data,
            "opportunity": opportunity_data,
            "application": {"opportunityId": "opp-001", "requestedAmount": "250000"},
        })
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["analysisMode"] == "opportunity_match"
        assert data["industryAlignment"]["match"] == "moderate"
        assert data["compatibilityScore"] == 90
        assert data["eligibilityStatus"] == "eligible"

    def test_numeric_requested_amount(self, client, complete_profile_data, opportunity_data):
        response = client.post(APPLICATION_URL, json={
            "profile": complete_profile_data,
            "opportunity": opportunity_data,
            "application": {"requestedAmount": 500000},
        })
        assert response.json()["compatibilityScore"] == 90

    @pytest.mark.parametrize("amount", ["50000", "600000", "abc", "-1"])
    def test_amount_rejection_is_not_an_error(
        self, client, complete_profile_data, opportunity_data, amount
    ):
        response = client.post(APPLICATION_URL, json={
            "profile": complete_profile_data,
            "opportunity": opportunity_data,
            "application": {"requestedAmount": amount},
        })
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["compatibilityScore"] == 0
        assert data["eligibilityStatus"] == "ineligible"
        assert data["readyToProceed"] is False
        assert len(data["riskFlags"]) == 1
        assert data["riskFlags"][0]["severity"] == "high"

    def test_amount_beyond_float_range(self, client, complete_profile_data, opportunity_data):
        response = client.post(APPLICATION_URL, json={
            "profile": complete_profile_data,
            "opportunity": opportunity_data,
            "application": {"requestedAmount": "1e400"},
        })
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["compatibilityScore"] == 0
        assert "exceeds maximum investment" in data["riskFlags"][0]["impact"]

    def test_overflowing_json_amount_is_invalid(self, client):
        body = (
            '{"profile": {}, "opportunity": {"id": "opp-001", "minInvestment": 100000, '
            '"maxInvestment": 500000}, "application": {"requestedAmount": 1e400}}'
        )
        response = client.post(
            APPLICATION_URL, content=body, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["compatibilityScore"] == 0
        assert data["financialReadiness"]["details"] == "Invalid funding amount specified"

    def test_missing_application(self, client, complete_profile_data, opportunity_data):
        response = client.post(APPLICATION_URL, json={
            "profile": complete_profile_data,
            "opportunity": opportunity_data,
        })
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["error_code"] == "MissingApplicationDataException"
        assert "opp-001" in data["message"]
        assert "timestamp" in data

    def test_inverted_investment_range(self, client, complete_profile_data, opportunity_data):
        opportunity_data.update({"minInvestment": 500000, "maxInvestment": 100000})
        response = client.post(APPLICATION_URL, json={
            "profile": complete_profile_data,
            "opportunity": opportunity_data,
            "application": {"requestedAmount": "250000"},
        })
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "max_investment must be >= min_investment"

    def test_zero_minimum_investment(self, client, complete_profile_data, opportunity_data):
        opportunity_data["minInvestment"] = 0
        response = client.post(APPLICATION_URL, json={
            "profile": complete_profile_data,
            "opportunity": opportunity_data,
            "application": {"requestedAmount": "250000"},
        })
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["message"] == (
            "Field 'opportunity.minInvestment' must be greater than zero"
        )

    def test_missing_opportunity(self, client, complete_profile_data):
        response = client.post(APPLICATION_URL, json={"profile": complete_profile_data})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["message"] == "Field 'opportunity' is required"
