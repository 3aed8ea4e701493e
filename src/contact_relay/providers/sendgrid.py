"""SendGrid email provider."""

import logging

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Content, Email, Mail, To

from ..models import RenderedMessage, SendResult
from ..exceptions import DeliveryError
from .base import BaseEmailProvider, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class SendGridProvider(BaseEmailProvider):
    """SendGrid email provider."""

    name = "sendgrid"

    def __init__(self, from_email: str, to_email: str, api_key: str, timeout: float = DEFAULT_TIMEOUT):
        """Initialize SendGrid provider.

        Args:
            from_email: Sender email address
            to_email: Destination address
            api_key: SendGrid API key
            timeout: Request timeout in seconds
        """
        super().__init__(from_email, to_email, timeout)
        self.api_key = api_key
        self.client = SendGridAPIClient(api_key)
        self.client.client.timeout = timeout

    def send(self, message: RenderedMessage, reply_to: str) -> SendResult:
        """Send email via SendGrid."""
        try:
            response = self.client.send(self._build_mail(message, reply_to))
            if response.status_code not in (200, 201, 202):
                raise DeliveryError(
                    f"SendGrid returned status {response.status_code}: {response.body}"
                )
        except DeliveryError as e:
            logger.error(f"SendGrid error: {e}")
            return self._failure(str(e))
        except Exception as e:
            logger.error(f"Unexpected SendGrid error: {e}")
            return self._failure(str(e))

        message_id = response.headers.get("X-Message-Id") if response.headers else None
        logger.info(f"Email sent to {self.to_email} via SendGrid (id: {message_id})")
        return self._success(message_id)

    def _build_mail(self, message: RenderedMessage, reply_to: str) -> Mail:
        mail = Mail(
            from_email=self.from_email,
            to_emails=To(self.to_email),
            subject=message.subject,
        )
        mail.add_content(Content("text/plain", message.text_body))
        mail.add_content(Content("text/html", message.html_body))
        mail.reply_to = Email(reply_to)
        return mail
