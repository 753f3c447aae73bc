"""
Main FastAPI application entry point.
Serves the ACMG evidence scoring API.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI

from acmg_scorer.core.config import settings
from acmg_scorer.core.constants import APP_VERSION
from acmg_scorer.core.evidence_codes import EVIDENCE_CODES
from acmg_scorer.core.logging_config import configure_logging, get_logger
from acmg_scorer.routes.scoring_router import router as scoring_api_router

logger = get_logger(__name__)


# Application Lifespan Manager
@asynccontextmanager
async def lifespan(_: FastAPI):
    """Configures logging on startup."""
    configure_logging(settings.log_level)
    logger.info("Application startup.", evidence_codes=len(EVIDENCE_CODES))

    yield

    logger.info("Application shutdown.")


app = FastAPI(
    title="ACMG Evidence Scoring API",
    description="Point-based ACMG/AMP variant classification.",
    version=APP_VERSION,
    lifespan=lifespan
)

# API Routers
app.include_router(scoring_api_router, tags=["Scoring"])


# Root Endpoint
@app.get("/")
async def root():
    """A simple health check endpoint."""
    return {
        "message": "ACMG Evidence Scoring API is running.",
        "version": APP_VERSION
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "acmg-evidence-scoring",
        "version": APP_VERSION
    }


# Uvicorn Runner
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
