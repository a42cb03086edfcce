"""Liveness endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from meeting_summarizer.config import AppConfig
from meeting_summarizer.dependencies import get_config
from meeting_summarizer.response_models import HealthResponse

router = APIRouter(tags=["health"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]


@router.get("/health", response_model=HealthResponse)
def health(config: ConfigDep) -> HealthResponse:
    """Reports that the service is up and which integrations are configured."""
    return HealthResponse(
        status="OK",
        message="AI Meeting Notes Summarizer Backend is running",
        gemini_configured=bool(config.gemini.api_key),
        email_configured=config.email.configured,
    )
