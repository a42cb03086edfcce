"""Infrastructure interface exports."""

from meeting_summarizer.infrastructure.interfaces.mail_transport import MailTransport
from meeting_summarizer.infrastructure.interfaces.summarization_service import (
    SummarizationService,
)

__all__ = [
    "MailTransport",
    "SummarizationService",
]
