"""Response models for the summarizer API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(_CamelModel):
    """Service liveness and configuration flags."""

    status: str
    message: str
    gemini_configured: bool
    email_configured: bool


class SummaryResponse(_CamelModel):
    """Generated summary echoed with its inputs."""

    success: bool = True
    summary: str
    original_transcript: str
    custom_prompt: str


class SendEmailResponse(_CamelModel):
    """Result of a successful email dispatch."""

    success: bool = True
    message: str
    recipients: list[str]


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str
    details: str | None = None


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid input"},
    500: {"model": ErrorResponse, "description": "Extraction, provider or mail error"},
}
