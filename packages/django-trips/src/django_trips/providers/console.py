"""Console email provider for development."""

import logging
import uuid

from .base import BaseEmailProvider, SendResult

logger = logging.getLogger(__name__)


class ConsoleEmailProvider(BaseEmailProvider):
    """Email provider that logs to console (for development).

    Does not actually send emails - just logs them for debugging.
    """

    provider_name = "console"

    def send(self, recipients, subject, body_text, body_html=None, attachments=None) -> SendResult:
        """Log email to console and return success."""
        fake_message_id = f"console-{uuid.uuid4().hex[:12]}"

        logger.info(
            "\n"
            + "=" * 60 + "\n"
            + "CONSOLE EMAIL (not actually sent)\n"
            + "=" * 60 + "\n"
            + f"To: {', '.join(recipients)}\n"
            + f"From: {self.config.from_header}\n"
            + f"Subject: {subject}\n"
            + "-" * 60 + "\n"
            + f"{body_text}\n"
            + "=" * 60
        )

        if body_html:
            logger.debug("HTML body length: %d chars", len(body_html))
        for attachment in attachments or ():
            logger.debug("Attachment: %s (%d bytes)", attachment.filename, len(attachment.content))

        return SendResult.ok(provider=self.provider_name, message_id=fake_message_id)
