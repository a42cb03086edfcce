"""Domain models for transcript summarization and delivery."""

from pydantic import BaseModel, field_validator

from meeting_summarizer.exceptions import FileTooLargeError, UnsupportedFormatError

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

TEXT_MIME_TYPES = frozenset({"text/plain", "text/markdown"})
PDF_MIME_TYPE = "application/pdf"
WORD_MIME_TYPES = frozenset(
    {
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)
SUPPORTED_MIME_TYPES = TEXT_MIME_TYPES | {PDF_MIME_TYPE} | WORD_MIME_TYPES


class UploadedFile(BaseModel, frozen=True):
    """An accepted document upload held in memory for one request."""

    data: bytes
    declared_mime_type: str
    original_name: str
    size_bytes: int

    @field_validator("declared_mime_type")
    @classmethod
    def _check_mime_type(cls, value: str) -> str:
        if value not in SUPPORTED_MIME_TYPES:
            raise ValueError(f"Unsupported file type: {value}")
        return value

    @field_validator("size_bytes")
    @classmethod
    def _check_size(cls, value: int) -> int:
        if value < 0 or value > MAX_UPLOAD_BYTES:
            raise ValueError(f"File size {value} is outside 0..{MAX_UPLOAD_BYTES}")
        return value

    @classmethod
    def accept(
        cls, data: bytes, declared_mime_type: str | None, original_name: str | None
    ) -> "UploadedFile":
        """
        Builds an UploadedFile after checking the upload constraints.

        Raises:
            UnsupportedFormatError: If the MIME type is not on the allow-list.
            FileTooLargeError: If the payload exceeds MAX_UPLOAD_BYTES.
        """
        mime_type = declared_mime_type or ""
        if mime_type not in SUPPORTED_MIME_TYPES:
            raise UnsupportedFormatError(mime_type)
        if len(data) > MAX_UPLOAD_BYTES:
            raise FileTooLargeError(len(data), MAX_UPLOAD_BYTES)
        return cls(
            data=data,
            declared_mime_type=mime_type,
            original_name=original_name or "upload",
            size_bytes=len(data),
        )


class SummaryRequest(BaseModel, frozen=True):
    """A transcript paired with the instruction that shapes its summary."""

    transcript: str
    instruction: str

    @field_validator("transcript", "instruction")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


class ComposedPrompt(BaseModel, frozen=True):
    """System and user prompts sent to the provider, in that order."""

    system_prompt: str
    user_prompt: str


class SummaryResult(BaseModel, frozen=True):
    """A generated summary together with the inputs that produced it."""

    text: str
    source_transcript: str
    instruction: str


class EmailJob(BaseModel, frozen=True):
    """A rendered summary email addressed to validated recipients."""

    recipients: tuple[str, ...]
    subject: str
    body_html: str

    @field_validator("recipients")
    @classmethod
    def _has_recipients(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one recipient is required")
        return tuple(dict.fromkeys(value))


class DispatchResult(BaseModel, frozen=True):
    """Outcome of a successful dispatch."""

    sent_count: int
    accepted_recipients: tuple[str, ...]
