"""Service composition and FastAPI dependency getters."""

from dataclasses import dataclass

from fastapi import Request
from google import genai

from meeting_summarizer.config import AppConfig
from meeting_summarizer.domain import (
    DocumentExtractor,
    EmailDispatcher,
    MeetingSummarizer,
)
from meeting_summarizer.infrastructure import GeminiSummarizer, SmtpMailTransport
from meeting_summarizer.infrastructure.interfaces import (
    MailTransport,
    SummarizationService,
)


@dataclass(frozen=True)
class Services:
    """Request-independent components shared by all requests."""

    config: AppConfig
    summarizer: MeetingSummarizer
    extractor: DocumentExtractor
    dispatcher: EmailDispatcher


def build_services(
    config: AppConfig,
    summarization_service: SummarizationService | None = None,
    mail_transport: MailTransport | None = None,
) -> Services:
    """Wires the components for a configuration, defaulting to Gemini and SMTP."""
    if summarization_service is None:
        client = genai.Client(api_key=config.gemini.api_key)
        summarization_service = GeminiSummarizer(
            client, config.gemini.model_name, config.gemini.timeout_seconds
        )
    if mail_transport is None:
        mail_transport = SmtpMailTransport(config.email)

    return Services(
        config=config,
        summarizer=MeetingSummarizer(summarization_service),
        extractor=DocumentExtractor(),
        dispatcher=EmailDispatcher(mail_transport),
    )


def get_services(request: Request) -> Services:
    """Returns the services attached to the running application."""
    return request.app.state.services


def get_config(request: Request) -> AppConfig:
    return get_services(request).config


def get_summarizer(request: Request) -> MeetingSummarizer:
    return get_services(request).summarizer


def get_extractor(request: Request) -> DocumentExtractor:
    return get_services(request).extractor


def get_dispatcher(request: Request) -> EmailDispatcher:
    return get_services(request).dispatcher
