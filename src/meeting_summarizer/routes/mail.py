"""Summary email endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from meeting_summarizer.api_errors import bad_request, from_email_error
from meeting_summarizer.dependencies import get_dispatcher
from meeting_summarizer.domain import EmailDispatcher
from meeting_summarizer.exceptions import EmailDispatchError, NoValidRecipientsError
from meeting_summarizer.request_models import SendEmailRequest
from meeting_summarizer.response_models import ERROR_RESPONSES, SendEmailResponse

router = APIRouter(prefix="/api", tags=["email"], responses=ERROR_RESPONSES)

DispatcherDep = Annotated[EmailDispatcher, Depends(get_dispatcher)]


@router.post("/send-email", response_model=SendEmailResponse)
async def send_email(
    dispatcher: DispatcherDep, body: SendEmailRequest | None = None
) -> SendEmailResponse:
    """Emails a summary to each valid recipient."""
    if body is None or body.recipients is None or not body.summary:
        raise bad_request("Recipients and summary are required")

    try:
        result = await dispatcher.dispatch(
            body.recipients, body.subject, body.summary, body.sender_name
        )
    except NoValidRecipientsError:
        raise bad_request("No valid email addresses provided")
    except EmailDispatchError as e:
        raise from_email_error(e) from e

    return SendEmailResponse(
        message=f"Summary sent successfully to {result.sent_count} recipient(s)",
        recipients=list(result.accepted_recipients),
    )
