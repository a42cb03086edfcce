"""Abstract interface for outbound mail delivery."""

from abc import ABC, abstractmethod


class MailTransport(ABC):
    """Abstract base class for mail transports."""

    @abstractmethod
    def send(self, recipient: str, subject: str, body_html: str) -> None:
        """
        Sends one HTML message to one recipient.

        Args:
            recipient: Destination address.
            subject: Message subject line.
            body_html: Rendered HTML body.

        Raises:
            EmailDispatchError: If the transport rejects or fails the send.
        """
        pass
