"""Core business logic for summarizing a transcript."""

from meeting_summarizer.domain.models import SummaryRequest, SummaryResult
from meeting_summarizer.domain.prompt_composer import compose
from meeting_summarizer.infrastructure.interfaces import SummarizationService
from meeting_summarizer.logging import setup_logging

logger = setup_logging()


class MeetingSummarizer:
    """Composes prompts for a transcript and asks the provider for a summary."""

    def __init__(self, service: SummarizationService):
        self._service = service

    async def summarize(self, request: SummaryRequest) -> SummaryResult:
        """
        Produces a summary of the request's transcript.

        Raises:
            SummarizationError: If the provider call fails.
        """
        logger.info(
            "Generating summary",
            extra={
                "transcript_length": len(request.transcript),
                "instruction_length": len(request.instruction),
            },
        )
        prompt = compose(request.transcript, request.instruction)
        text = await self._service.summarize(prompt.system_prompt, prompt.user_prompt)
        return SummaryResult(
            text=text,
            source_transcript=request.transcript,
            instruction=request.instruction,
        )
