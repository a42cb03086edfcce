"""SMTP implementation of the MailTransport interface."""

import smtplib
import ssl
from email.message import EmailMessage

from meeting_summarizer.config import EmailConfig
from meeting_summarizer.exceptions import EmailDispatchError, TransportErrorKind
from meeting_summarizer.infrastructure.interfaces import MailTransport
from meeting_summarizer.logging import setup_logging

logger = setup_logging()

IMPLICIT_TLS_PORT = 465


def classify_transport_error(error: BaseException) -> TransportErrorKind:
    """Maps an exception raised while sending mail onto a failure kind."""
    if isinstance(error, smtplib.SMTPAuthenticationError):
        return TransportErrorKind.AUTH_FAILURE
    if isinstance(error, ssl.SSLCertVerificationError) or (
        "self-signed certificate" in str(error)
    ):
        return TransportErrorKind.TLS_FAILURE
    if isinstance(error, (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected)):
        return TransportErrorKind.CONNECTION_FAILURE
    # SMTPException subclasses OSError, so protocol rejections are handled first.
    if isinstance(error, smtplib.SMTPException):
        return TransportErrorKind.UNKNOWN
    if isinstance(error, OSError):
        return TransportErrorKind.CONNECTION_FAILURE
    return TransportErrorKind.UNKNOWN


class SmtpMailTransport(MailTransport):
    """Sends HTML mail through an authenticated SMTP relay."""

    def __init__(self, config: EmailConfig):
        self._config = config

    def send(self, recipient: str, subject: str, body_html: str) -> None:
        try:
            message = self._build_message(recipient, subject, body_html)
            with self._connect() as server:
                server.login(self._config.user, self._config.app_password)
                server.send_message(message)
        except Exception as e:
            kind = classify_transport_error(e)
            logger.exception(
                "SMTP send failed",
                extra={
                    "host": self._config.smtp_host,
                    "port": self._config.smtp_port,
                    "kind": kind.value,
                },
            )
            raise EmailDispatchError(kind, recipient, cause=e) from e

        logger.info(
            "Email sent",
            extra={"host": self._config.smtp_host, "recipient": recipient},
        )

    def _build_message(
        self, recipient: str, subject: str, body_html: str
    ) -> EmailMessage:
        # Header assignment raises ValueError on CR/LF in caller input.
        message = EmailMessage()
        message["From"] = self._config.user
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body_html, subtype="html")
        return message

    def _connect(self) -> smtplib.SMTP:
        """Opens a TLS-protected connection to the relay."""
        context = self._tls_context()
        if self._config.smtp_port == IMPLICIT_TLS_PORT:
            return smtplib.SMTP_SSL(
                self._config.smtp_host,
                self._config.smtp_port,
                timeout=self._config.timeout_seconds,
                context=context,
            )
        server = smtplib.SMTP(
            self._config.smtp_host,
            self._config.smtp_port,
            timeout=self._config.timeout_seconds,
        )
        try:
            server.starttls(context=context)
        except Exception:
            server.close()
            raise
        return server

    def _tls_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if not self._config.verify_tls:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context
