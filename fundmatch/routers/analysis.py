"""
Compatibility Analysis Router - SME Funding Compatibility Platform
fundmatch/routers/analysis.py

Endpoints:
  POST /api/v1/analysis/profile      - Funding readiness of a profile on its own
  POST /api/v1/analysis/application  - Compatibility of an application with an opportunity
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fundmatch.config import settings
from fundmatch.core.dependencies import get_scoring_engine
from fundmatch.core.exceptions import AnalysisException
from fundmatch.models.opportunity import ApplicationDraft, FundingOpportunity
from fundmatch.models.profile import BusinessProfile
from fundmatch.models.result import CompatibilityResult, ErrorResponse
from fundmatch.scoring.engine import CompatibilityEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/analysis", tags=["Compatibility Analysis"])


#  Validation Error Messages


DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "greater_than": "Field '{field}' must be greater than zero",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "value_error": "Field '{field}' is invalid",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "finite_number": "Field '{field}' must be a finite number",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "string_type": "Field '{field}' must be a string",
    "model_type": "Field '{field}' must be an object",
    "list_type": "Field '{field}' must be a list",
}


def get_validation_message(field: str, error_type: str) -> str:
    for key, template in DEFAULT_MESSAGES.items():
        if error_type == key:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def _error_content(error_code: str, message: str, details: Optional[dict] = None) -> dict:
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
        timestamp=datetime.now(timezone.utc),
    ).model_dump(mode="json")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=422,
            content=_error_content("VALIDATION_ERROR", "Request validation failed"),
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_content("INVALID_REQUEST", "Malformed JSON request body"),
        )
    field = ".".join(str(l) for l in loc if l != "body")
    message = get_validation_message(field, error_type)
    if error_type == "value_error" and err.get("msg"):
        message = err["msg"].removeprefix("Value error, ")
    return JSONResponse(
        status_code=422,
        content=_error_content(
            "VALIDATION_ERROR",
            message,
            {"field": field, "type": error_type} if field else None,
        ),
    )


async def analysis_exception_handler(request: Request, exc: AnalysisException):
    logger.warning(f"Analysis request rejected: {exc}")
    return JSONResponse(
        status_code=422,
        content=_error_content(type(exc).__name__, str(exc)),
    )


#  Schemas


class ProfileAnalysisRequest(BaseModel):
    profile: BusinessProfile


class ApplicationAnalysisRequest(BaseModel):
    profile: BusinessProfile
    opportunity: FundingOpportunity
    application: Optional[ApplicationDraft] = Field(
        default=None,
        description="Application draft carrying requestedAmount"
    )


#  Endpoints


@router.post(
    "/profile",
    response_model=CompatibilityResult,
    summary="Analyze profile funding readiness",
)
async def analyze_profile(
    request: ProfileAnalysisRequest,
    engine: CompatibilityEngine = Depends(get_scoring_engine),
) -> CompatibilityResult:
    result = engine.analyze_profile(request.profile)
    logger.info(
        f"Profile analysis: score={result.compatibility_score} "
        f"status={result.eligibility_status.value}"
    )
    return result


@router.post(
    "/application",
    response_model=CompatibilityResult,
    summary="Analyze application against a funding opportunity",
    description="""
    Applies the requested-amount gate first. An amount outside the
    opportunity's investment range returns a zero-score, ineligible result
    (HTTP 200), not an error.
    """,
)
async def analyze_application(
    request: ApplicationAnalysisRequest,
    engine: CompatibilityEngine = Depends(get_scoring_engine),
) -> CompatibilityResult:
    result = engine.analyze_application(
        request.profile, request.opportunity, request.application
    )
    logger.info(
        f"Application analysis ({request.opportunity.id or 'unnamed opportunity'}): "
        f"score={result.compatibility_score} status={result.eligibility_status.value}"
    )
    return result
