import asyncio

import pytest
from conftest import FakeMailTransport

from meeting_summarizer.domain import EmailDispatcher
from meeting_summarizer.domain.email_dispatcher import (
    DEFAULT_SENDER_NAME,
    DEFAULT_SUBJECT,
    filter_recipients,
    is_valid_email,
    render_body,
)
from meeting_summarizer.exceptions import (
    EmailDispatchError,
    NoValidRecipientsError,
    TransportErrorKind,
)


@pytest.mark.parametrize("address", ["a@b.co", "first.last+tag@mail.example.org"])
def test_valid_addresses(address):
    assert is_valid_email(address)


@pytest.mark.parametrize(
    "address", ["not-an-email", "a@b", "", "a b@c.de", "a@@b.co", None, 42]
)
def test_invalid_addresses(address):
    assert not is_valid_email(address)


def test_filter_recipients_drops_invalid_and_duplicates_in_order():
    candidates = ["z@x.io", "bad", "a@b.co", "z@x.io", "c@d.org"]

    assert filter_recipients(candidates) == ("z@x.io", "a@b.co", "c@d.org")


def test_render_body_converts_newlines_and_escapes_markup():
    body = render_body("Line 1\n<script>alert(1)</script> & more", None)

    assert "Line 1<br>&lt;script&gt;alert(1)&lt;/script&gt; &amp; more" in body
    assert f"<strong>From:</strong> {DEFAULT_SENDER_NAME}" in body
    assert "<script>" not in body


def test_render_body_uses_sender_name():
    assert "<strong>From:</strong> Dana Ops" in render_body("x", "Dana Ops")


def test_all_invalid_recipients_sends_nothing():
    transport = FakeMailTransport()
    dispatcher = EmailDispatcher(transport)

    with pytest.raises(NoValidRecipientsError):
        asyncio.run(dispatcher.dispatch(["bad", "a@b", ""], None, "x", None))
    assert transport.sent == []


def test_dispatch_sends_one_message_per_valid_recipient():
    transport = FakeMailTransport()
    dispatcher = EmailDispatcher(transport)

    result = asyncio.run(
        dispatcher.dispatch(
            ["ana@example.com", "nope", "raj@example.com"],
            None,
            "Decision: ship",
            "Team Lead",
        )
    )

    assert result.sent_count == 2
    assert result.accepted_recipients == ("ana@example.com", "raj@example.com")
    assert sorted(r for r, _, _ in transport.sent) == [
        "ana@example.com",
        "raj@example.com",
    ]
    assert {subject for _, subject, _ in transport.sent} == {DEFAULT_SUBJECT}
    assert all("Decision: ship" in body for _, _, body in transport.sent)


def test_single_failed_send_fails_the_dispatch():
    transport = FakeMailTransport()
    transport.failures["raj@example.com"] = EmailDispatchError(
        TransportErrorKind.CONNECTION_FAILURE,
        "raj@example.com",
        cause=ConnectionRefusedError("Connection refused"),
    )
    dispatcher = EmailDispatcher(transport)

    with pytest.raises(EmailDispatchError) as exc_info:
        asyncio.run(
            dispatcher.dispatch(["ana@example.com", "raj@example.com"], "S", "x", None)
        )

    assert exc_info.value.kind is TransportErrorKind.CONNECTION_FAILURE


def test_build_job_applies_defaults():
    job = EmailDispatcher(FakeMailTransport()).build_job(["a@b.co"], "", "x", None)

    assert job.subject == DEFAULT_SUBJECT
    assert job.recipients == ("a@b.co",)
