"""Domain layer exports."""

from meeting_summarizer.domain.document_extractor import DocumentExtractor
from meeting_summarizer.domain.email_dispatcher import EmailDispatcher
from meeting_summarizer.domain.meeting_summarizer import MeetingSummarizer
from meeting_summarizer.domain.models import (
    DispatchResult,
    EmailJob,
    SummaryRequest,
    SummaryResult,
    UploadedFile,
)

__all__ = [
    "DispatchResult",
    "DocumentExtractor",
    "EmailDispatcher",
    "EmailJob",
    "MeetingSummarizer",
    "SummaryRequest",
    "SummaryResult",
    "UploadedFile",
]
