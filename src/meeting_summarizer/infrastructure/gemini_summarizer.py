"""Gemini summarization service implementation."""

import asyncio

import httpx
from google import genai
from google.genai import errors as genai_errors

from meeting_summarizer.exceptions import ProviderErrorKind, SummarizationError
from meeting_summarizer.infrastructure.interfaces import SummarizationService
from meeting_summarizer.logging import setup_logging

logger = setup_logging()

_STATUS_CODE_KINDS = {
    401: ProviderErrorKind.INVALID_CREDENTIALS,
    403: ProviderErrorKind.INVALID_CREDENTIALS,
    404: ProviderErrorKind.MODEL_UNAVAILABLE,
    429: ProviderErrorKind.QUOTA_EXCEEDED,
}

# Checked in order; first match wins.
_MESSAGE_MARKERS = (
    ("API_KEY_INVALID", ProviderErrorKind.INVALID_CREDENTIALS),
    ("QUOTA_EXCEEDED", ProviderErrorKind.QUOTA_EXCEEDED),
    ("MODEL_NOT_FOUND", ProviderErrorKind.MODEL_UNAVAILABLE),
    ("fetch failed", ProviderErrorKind.NETWORK_FAILURE),
    ("network", ProviderErrorKind.NETWORK_FAILURE),
    ("timeout", ProviderErrorKind.TIMEOUT),
)


def classify_provider_message(message: str) -> ProviderErrorKind:
    """Maps a raw provider error message onto a failure kind by substring."""
    for marker, kind in _MESSAGE_MARKERS:
        if marker in message:
            return kind
    return ProviderErrorKind.UNKNOWN


def classify_provider_error(error: BaseException) -> ProviderErrorKind:
    """
    Maps an exception raised by a provider call onto a failure kind.

    Timeouts come first. A google-genai API error is matched on its message
    before its HTTP status code, since Gemini reports a bad key as a 400.
    httpx transport failures are network failures. Anything else falls
    back to classify_provider_message().
    """
    if isinstance(
        error, (asyncio.TimeoutError, TimeoutError, httpx.TimeoutException)
    ):
        return ProviderErrorKind.TIMEOUT

    message = str(error)
    if isinstance(error, genai_errors.APIError):
        by_message = classify_provider_message(message)
        if by_message is not ProviderErrorKind.UNKNOWN:
            return by_message
        return _STATUS_CODE_KINDS.get(error.code, ProviderErrorKind.UNKNOWN)

    if isinstance(error, httpx.TransportError):
        return ProviderErrorKind.NETWORK_FAILURE

    return classify_provider_message(message)


class GeminiSummarizer(SummarizationService):
    """Summarization service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str, timeout_seconds: float):
        self._client = client
        self._model_name = model_name
        self._timeout_seconds = timeout_seconds

    async def summarize(self, system_prompt: str, user_prompt: str) -> str:
        """
        Issues one time-bounded generate-content call to Gemini.

        Both prompts are sent as ordered content parts. The call is
        cancelled once the configured ceiling elapses. There is no retry.

        Raises:
            SummarizationError: If the call fails, with the classified kind.
        """
        logger.info(
            "Calling Gemini API",
            extra={
                "model": self._model_name,
                "prompt_length": len(user_prompt),
                "timeout_seconds": self._timeout_seconds,
            },
        )
        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self._model_name,
                    contents=[system_prompt, user_prompt],
                ),
                timeout=self._timeout_seconds,
            )
        except Exception as e:
            kind = classify_provider_error(e)
            logger.exception(
                "Gemini API call failed",
                extra={"model": self._model_name, "kind": kind.value},
            )
            cause: BaseException = e
            if kind is ProviderErrorKind.TIMEOUT and not str(e):
                cause = TimeoutError(
                    f"Gemini request timeout after {self._timeout_seconds:g}s"
                )
            raise SummarizationError(kind, cause=cause) from e

        text = response.text
        if text is None:
            logger.error(
                "Gemini returned empty response", extra={"model": self._model_name}
            )
            raise SummarizationError(
                ProviderErrorKind.UNKNOWN,
                cause=ValueError("Gemini returned empty response"),
            )

        logger.info("Summary generated", extra={"summary_length": len(text)})
        return text
