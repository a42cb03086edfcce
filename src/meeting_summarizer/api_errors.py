"""HTTP error type and the user-facing messages for each failure kind."""

from meeting_summarizer.exceptions import (
    EmailDispatchError,
    ProviderErrorKind,
    SummarizationError,
    TransportErrorKind,
)

SUMMARY_FAILED = "Failed to generate summary"
UPLOAD_FAILED = "Failed to process uploaded file"
EMAIL_FAILED = "Failed to send email"
INTERNAL_ERROR = "Internal server error"

PROVIDER_MESSAGES = {
    ProviderErrorKind.INVALID_CREDENTIALS: (
        "Invalid Gemini API key. Please check your API key configuration."
    ),
    ProviderErrorKind.QUOTA_EXCEEDED: (
        "API quota exceeded. Please check your Gemini API usage limits."
    ),
    ProviderErrorKind.MODEL_UNAVAILABLE: (
        "Gemini model not found. Please check the model configuration."
    ),
    ProviderErrorKind.NETWORK_FAILURE: (
        "Network connection failed. "
        "Please check your internet connection and firewall settings."
    ),
    ProviderErrorKind.TIMEOUT: (
        "Request timed out. Please try again or check your network connection."
    ),
}

TRANSPORT_MESSAGES = {
    TransportErrorKind.CONNECTION_FAILURE: (
        "Email connection failed. Please check your Gmail settings and app password."
    ),
    TransportErrorKind.AUTH_FAILURE: (
        "Email authentication failed. "
        "Please check your Gmail username and app password."
    ),
    TransportErrorKind.TLS_FAILURE: (
        "SSL certificate issue. Please check your network configuration."
    ),
}


class ApiError(Exception):
    """A failure converted for the HTTP boundary."""

    def __init__(self, status_code: int, message: str, details: str | None = None):
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(message)

    def to_body(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


def bad_request(message: str) -> ApiError:
    return ApiError(400, message)


def from_summarization_error(error: SummarizationError, fallback: str) -> ApiError:
    """Maps a provider failure to HTTP 500 with a kind-specific message."""
    return ApiError(500, PROVIDER_MESSAGES.get(error.kind, fallback), str(error))


def from_email_error(error: EmailDispatchError) -> ApiError:
    """Maps a transport failure to HTTP 500 with a kind-specific message."""
    return ApiError(500, TRANSPORT_MESSAGES.get(error.kind, EMAIL_FAILED), str(error))
