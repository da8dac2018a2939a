"""AWS SES email provider."""

import logging

from .base import BaseEmailProvider, SendResult

logger = logging.getLogger(__name__)


class SESEmailProvider(BaseEmailProvider):
    """Email provider using AWS Simple Email Service (SES).

    Uses the raw-message API so the calendar attachment survives. AWS
    credentials come from the standard boto3 chain (environment, profile,
    instance role).
    """

    provider_name = "ses"

    def _get_client(self):
        """Create boto3 SES client."""
        import boto3

        return boto3.client("ses", region_name=self.config.ses_region or "us-east-1")

    def send(self, recipients, subject, body_text, body_html=None, attachments=None) -> SendResult:
        """Send email via SES SendRawEmail."""
        try:
            message = self.build_message(recipients, subject, body_text, body_html, attachments)

            send_params = {
                "Source": self.config.from_header,
                "Destinations": list(recipients),
                "RawMessage": {"Data": message.message().as_bytes()},
            }
            if self.config.ses_configuration_set:
                send_params["ConfigurationSetName"] = self.config.ses_configuration_set

            client = self._get_client()
            response = client.send_raw_email(**send_params)
            message_id = response.get("MessageId", "")

            logger.info(f"SES email sent: {message_id} to {len(recipients)} recipients")
            return SendResult.ok(provider=self.provider_name, message_id=message_id)

        except Exception as e:
            error_msg = str(e)
            logger.error(f"SES send failed: {error_msg}")
            return SendResult.fail(provider=self.provider_name, error=error_msg)
