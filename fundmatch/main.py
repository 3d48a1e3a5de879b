import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from fundmatch.config import settings
from fundmatch.core.exceptions import AnalysisException
from fundmatch.core.logging import configure_logging

# IMPORT ROUTERS
from fundmatch.routers.health import router as health_router
from fundmatch.routers.analysis import router as analysis_router
from fundmatch.routers.analysis import (
    analysis_exception_handler,
    validation_exception_handler,
)

configure_logging()
logger = structlog.get_logger(__name__)

# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Compatibility Analysis"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
    debug=settings.DEBUG,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(AnalysisException, analysis_exception_handler)

# REGISTER ROUTERS
app.include_router(health_router)    # Health
app.include_router(analysis_router)  # Compatibility Analysis


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    logger.info(
        "application_started",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        eligible_threshold=settings.ELIGIBLE_THRESHOLD,
        conditional_threshold=settings.CONDITIONAL_THRESHOLD,
    )


# SHUTDOWN EVENT
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("application_stopped", service=settings.APP_NAME)


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fundmatch.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
