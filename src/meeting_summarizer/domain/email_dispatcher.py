"""Core business logic for emailing summaries."""

import asyncio
import html
import re
from collections.abc import Sequence

from meeting_summarizer.domain.models import DispatchResult, EmailJob
from meeting_summarizer.exceptions import NoValidRecipientsError
from meeting_summarizer.infrastructure.interfaces import MailTransport
from meeting_summarizer.logging import setup_logging

logger = setup_logging()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

DEFAULT_SUBJECT = "Meeting Summary"
DEFAULT_SENDER_NAME = "AI Meeting Notes Summarizer"

_BODY_TEMPLATE = """
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #333;">Meeting Summary</h2>
        <p><strong>From:</strong> {sender_name}</p>
        <hr style="border: 1px solid #eee; margin: 20px 0;">
        <div style="background-color: #f9f9f9; padding: 20px; border-radius: 5px;">
          {summary}
        </div>
        <hr style="border: 1px solid #eee; margin: 20px 0;">
        <p style="color: #666; font-size: 12px;">
          This summary was generated using AI-powered meeting notes summarizer powered by Google Gemini.
        </p>
      </div>
    """


def is_valid_email(candidate: object) -> bool:
    """True for strings shaped like local@domain.tld with no whitespace."""
    return isinstance(candidate, str) and EMAIL_PATTERN.match(candidate) is not None


def filter_recipients(candidates: Sequence[object]) -> tuple[str, ...]:
    """Drops invalid addresses and duplicates, keeping first-seen order."""
    return tuple(dict.fromkeys(c for c in candidates if is_valid_email(c)))


def render_body(summary: str, sender_name: str | None) -> str:
    """Renders the HTML envelope around a summary."""
    escaped = html.escape(summary, quote=False)
    return _BODY_TEMPLATE.format(
        sender_name=html.escape(sender_name or DEFAULT_SENDER_NAME),
        summary=escaped.replace("\n", "<br>"),
    )


class EmailDispatcher:
    """Validates recipients and delivers one summary email to each of them."""

    def __init__(self, transport: MailTransport):
        self._transport = transport

    def build_job(
        self,
        recipients: Sequence[object],
        subject: str | None,
        summary: str,
        sender_name: str | None,
    ) -> EmailJob:
        """
        Builds an EmailJob from raw request input.

        Raises:
            NoValidRecipientsError: If no candidate address is valid.
        """
        accepted = filter_recipients(recipients)
        if not accepted:
            raise NoValidRecipientsError(len(recipients))
        return EmailJob(
            recipients=accepted,
            subject=subject or DEFAULT_SUBJECT,
            body_html=render_body(summary, sender_name),
        )

    async def dispatch(
        self,
        recipients: Sequence[object],
        subject: str | None,
        summary: str,
        sender_name: str | None,
    ) -> DispatchResult:
        """
        Sends the summary to every valid recipient concurrently.

        All sends are awaited together; the first failure fails the whole
        dispatch and nothing is reported per recipient.

        Raises:
            NoValidRecipientsError: If no candidate address is valid.
            EmailDispatchError: If any send fails.
        """
        job = self.build_job(recipients, subject, summary, sender_name)

        logger.info(
            "Dispatching summary email",
            extra={
                "candidate_count": len(recipients),
                "recipient_count": len(job.recipients),
            },
        )

        await asyncio.gather(
            *(
                asyncio.to_thread(
                    self._transport.send, recipient, job.subject, job.body_html
                )
                for recipient in job.recipients
            )
        )

        logger.info(
            "Summary email dispatched", extra={"sent_count": len(job.recipients)}
        )
        return DispatchResult(
            sent_count=len(job.recipients),
            accepted_recipients=job.recipients,
        )
