"""Summary generation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool

from meeting_summarizer.api_errors import (
    SUMMARY_FAILED,
    UPLOAD_FAILED,
    ApiError,
    bad_request,
    from_summarization_error,
)
from meeting_summarizer.dependencies import get_extractor, get_summarizer
from meeting_summarizer.domain import (
    DocumentExtractor,
    MeetingSummarizer,
    SummaryRequest,
    SummaryResult,
    UploadedFile,
)
from meeting_summarizer.domain.models import MAX_UPLOAD_BYTES
from meeting_summarizer.exceptions import (
    ExtractionError,
    FileTooLargeError,
    SummarizationError,
    UnsupportedFormatError,
)
from meeting_summarizer.logging import setup_logging
from meeting_summarizer.request_models import SummarizeTextRequest
from meeting_summarizer.response_models import ERROR_RESPONSES, SummaryResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["summaries"], responses=ERROR_RESPONSES)

SummarizerDep = Annotated[MeetingSummarizer, Depends(get_summarizer)]
ExtractorDep = Annotated[DocumentExtractor, Depends(get_extractor)]

UNSUPPORTED_FILE = "Only text, PDF, and Word documents are allowed"
FILE_TOO_LARGE = "File too large. Maximum size is 10MB"
NO_TEXT_EXTRACTED = "No text could be extracted from the uploaded file"


async def _summarize(
    summarizer: MeetingSummarizer, transcript: str, instruction: str, fallback: str
) -> SummaryResult:
    try:
        return await summarizer.summarize(
            SummaryRequest(transcript=transcript, instruction=instruction)
        )
    except SummarizationError as e:
        raise from_summarization_error(e, fallback) from e


def _to_response(result: SummaryResult) -> SummaryResponse:
    return SummaryResponse(
        summary=result.text,
        original_transcript=result.source_transcript,
        custom_prompt=result.instruction,
    )


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_text(
    summarizer: SummarizerDep, body: SummarizeTextRequest | None = None
) -> SummaryResponse:
    """Summarizes a transcript sent as JSON text."""
    if body is None or not body.transcript or not body.custom_prompt:
        raise bad_request("Transcript and custom prompt are required")

    result = await _summarize(
        summarizer, body.transcript, body.custom_prompt, SUMMARY_FAILED
    )
    return _to_response(result)


@router.post("/summarize-upload", response_model=SummaryResponse)
async def summarize_upload(
    summarizer: SummarizerDep,
    extractor: ExtractorDep,
    file: UploadFile | None = File(None),
    custom_prompt: str | None = Form(None, alias="customPrompt"),
) -> SummaryResponse:
    """
    Summarizes an uploaded text, markdown, PDF or Word document.

    The upload is accepted only for allow-listed MIME types up to 10 MiB.
    """
    if file is None:
        raise bad_request("No file uploaded")

    if file.size is not None and file.size > MAX_UPLOAD_BYTES:
        raise bad_request(FILE_TOO_LARGE)

    try:
        uploaded = UploadedFile.accept(
            await file.read(), file.content_type, file.filename
        )
    except UnsupportedFormatError:
        raise bad_request(UNSUPPORTED_FILE)
    except FileTooLargeError:
        raise bad_request(FILE_TOO_LARGE)

    if not custom_prompt:
        raise bad_request("Custom prompt is required")

    try:
        transcript = await run_in_threadpool(extractor.extract, uploaded)
    except UnsupportedFormatError:
        raise bad_request(UNSUPPORTED_FILE)
    except ExtractionError as e:
        raise ApiError(500, UPLOAD_FAILED, str(e)) from e

    if not transcript:
        raise bad_request(NO_TEXT_EXTRACTED)

    logger.info(
        "Summarizing uploaded file",
        extra={
            "file_name": uploaded.original_name,
            "size": uploaded.size_bytes,
            "transcript_length": len(transcript),
        },
    )
    result = await _summarize(summarizer, transcript, custom_prompt, UPLOAD_FAILED)
    return _to_response(result)
