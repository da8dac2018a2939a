"""Base provider interface for sending reminder email."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.utils import make_msgid
from typing import Optional, Sequence

from django.core.mail import EmailMultiAlternatives
from django.core.mail.utils import DNS_NAME

from ..conf import EmailConfig, get_email_config


@dataclass(frozen=True)
class EmailAttachment:
    """A file attached to an outgoing email."""

    filename: str
    content: bytes
    mimetype: str = "application/octet-stream"


@dataclass
class SendResult:
    """Result of a send operation."""

    success: bool
    provider: str
    message_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, provider: str, message_id: str = "") -> "SendResult":
        return cls(success=True, provider=provider, message_id=message_id)

    @classmethod
    def fail(cls, provider: str, error: str) -> "SendResult":
        return cls(success=False, provider=provider, error=error)


class BaseEmailProvider(ABC):
    """Abstract base class for email providers.

    Providers never raise for delivery problems; they return a failed
    SendResult so callers can record the error and move on.
    """

    provider_name: str = "base"

    def __init__(self, config: EmailConfig | None = None):
        self.config = config or get_email_config()

    @abstractmethod
    def send(
        self,
        recipients: Sequence[str],
        subject: str,
        body_text: str,
        body_html: str | None = None,
        attachments: Sequence[EmailAttachment] | None = None,
    ) -> SendResult:
        """Send one email to all recipients.

        Args:
            recipients: Email addresses for the To header
            subject: Subject line
            body_text: Plain text body
            body_html: HTML alternative (optional)
            attachments: Files to attach (optional)

        Returns:
            SendResult with success/failure status and provider details
        """
        raise NotImplementedError

    def validate_recipient(self, address: str) -> bool:
        """Basic email address check."""
        if not address or "@" not in address:
            return False
        local, domain = address.rsplit("@", 1)
        return bool(local and domain and "." in domain)

    def build_message(
        self,
        recipients: Sequence[str],
        subject: str,
        body_text: str,
        body_html: str | None = None,
        attachments: Sequence[EmailAttachment] | None = None,
    ) -> EmailMultiAlternatives:
        """Build a MIME message with a fresh Message-ID header."""
        message = EmailMultiAlternatives(
            subject=subject,
            body=body_text,
            from_email=self.config.from_header,
            to=list(recipients),
            reply_to=[self.config.reply_to] if self.config.reply_to else None,
            headers={"Message-ID": make_msgid(domain=str(DNS_NAME))},
        )
        if body_html:
            message.attach_alternative(body_html, "text/html")
        for attachment in attachments or ():
            message.attach(attachment.filename, attachment.content, attachment.mimetype)
        return message
