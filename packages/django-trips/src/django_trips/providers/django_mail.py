"""Email provider backed by Django's configured EMAIL_BACKEND."""

import logging

from .base import BaseEmailProvider, SendResult

logger = logging.getLogger(__name__)


class DjangoMailProvider(BaseEmailProvider):
    """Sends through django.core.mail (SMTP, console or locmem backends)."""

    provider_name = "django"

    def send(self, recipients, subject, body_text, body_html=None, attachments=None) -> SendResult:
        message = self.build_message(recipients, subject, body_text, body_html, attachments)
        message_id = message.extra_headers["Message-ID"]
        try:
            sent = message.send(fail_silently=False)
        except Exception as e:
            logger.error("Django mail send failed: %s", e)
            return SendResult.fail(provider=self.provider_name, error=str(e))

        if not sent:
            return SendResult.fail(provider=self.provider_name, error="Mail backend sent nothing")

        logger.info("Email sent via Django backend: %s to %d recipients", message_id, len(recipients))
        return SendResult.ok(provider=self.provider_name, message_id=message_id)
