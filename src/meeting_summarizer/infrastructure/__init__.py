"""Infrastructure layer exports."""

from meeting_summarizer.infrastructure.gemini_summarizer import GeminiSummarizer
from meeting_summarizer.infrastructure.smtp_transport import SmtpMailTransport

__all__ = [
    "GeminiSummarizer",
    "SmtpMailTransport",
]
