"""Request models for the summarizer API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SummarizeTextRequest(BaseModel):
    """Body of POST /api/summarize. Presence is checked by the route."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    transcript: str | None = None
    custom_prompt: str | None = None


class SendEmailRequest(BaseModel):
    """Body of POST /api/send-email."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Entries are validated individually by the dispatcher.
    recipients: list[Any] | None = None
    subject: str | None = None
    summary: str | None = None
    sender_name: str | None = None
