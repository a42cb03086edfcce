"""Custom exceptions for the meeting summarizer service."""

from enum import Enum


class ProviderErrorKind(str, Enum):
    """Failure categories of a summarization provider call."""

    INVALID_CREDENTIALS = "invalid_credentials"
    QUOTA_EXCEEDED = "quota_exceeded"
    MODEL_UNAVAILABLE = "model_unavailable"
    NETWORK_FAILURE = "network_failure"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


class TransportErrorKind(str, Enum):
    """Failure categories of a mail transport send."""

    AUTH_FAILURE = "auth_failure"
    CONNECTION_FAILURE = "connection_failure"
    TLS_FAILURE = "tls_failure"
    UNKNOWN = "unknown"


class UnsupportedFormatError(Exception):
    """Raised when a document's MIME type is not on the allow-list."""

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type}")


class FileTooLargeError(Exception):
    """Raised when an uploaded document exceeds the size ceiling."""

    def __init__(self, size_bytes: int, limit_bytes: int):
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
        super().__init__(
            f"File of {size_bytes} bytes exceeds the {limit_bytes} byte limit"
        )


class ExtractionError(Exception):
    """Raised when a document parser fails to produce text."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        reason = str(cause) if cause is not None else "unknown error"
        super().__init__(f"Failed to process file: {reason}")


class SummarizationError(Exception):
    """Raised when the summarization provider call fails."""

    def __init__(self, kind: ProviderErrorKind, cause: BaseException | None = None):
        self.kind = kind
        self.cause = cause
        super().__init__(_describe(cause) or kind.value)


class NoValidRecipientsError(Exception):
    """Raised when recipient filtering leaves nothing to send to."""

    def __init__(self, candidates: int):
        self.candidates = candidates
        super().__init__("No valid email addresses provided")


class EmailDispatchError(Exception):
    """Raised when delivering a summary to any recipient fails."""

    def __init__(
        self,
        kind: TransportErrorKind,
        recipient: str,
        cause: BaseException | None = None,
    ):
        self.kind = kind
        self.recipient = recipient
        self.cause = cause
        super().__init__(_describe(cause) or f"Failed to send email to {recipient}")


def _describe(cause: BaseException | None) -> str:
    """Returns the raw message of a cause, falling back to its type name."""
    if cause is None:
        return ""
    return str(cause) or type(cause).__name__
