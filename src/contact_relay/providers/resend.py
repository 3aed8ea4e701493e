"""Resend HTTP API provider."""

import logging

import requests

from ..models import RenderedMessage, SendResult
from ..exceptions import AuthenticationError, DeliveryError
from .base import BaseEmailProvider, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendProvider(BaseEmailProvider):
    """Resend transactional email provider."""

    name = "resend"

    def __init__(
        self,
        from_email: str,
        to_email: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        api_url: str = RESEND_API_URL,
    ):
        """Initialize Resend provider.

        Args:
            from_email: Sender email address, must belong to a verified domain
            to_email: Destination address
            api_key: Resend API key
            timeout: Request timeout in seconds
            api_url: Emails endpoint
        """
        super().__init__(from_email, to_email, timeout)
        self.api_key = api_key
        self.api_url = api_url

    def send(self, message: RenderedMessage, reply_to: str) -> SendResult:
        """Send email via the Resend API."""
        try:
            payload = self._post(self._build_payload(message, reply_to))
        except (AuthenticationError, DeliveryError) as e:
            logger.error(f"Resend error: {e}")
            return self._failure(str(e))
        except Exception as e:
            logger.error(f"Unexpected Resend error: {e}")
            return self._failure(str(e))

        logger.info(f"Email sent to {self.to_email} via Resend (id: {payload.get('id')})")
        return self._success(payload.get("id"))

    def _build_payload(self, message: RenderedMessage, reply_to: str) -> dict:
        return {
            "from": self.from_email,
            "to": [self.to_email],
            "reply_to": reply_to,
            "subject": message.subject,
            "text": message.text_body,
            "html": message.html_body,
        }

    def _post(self, payload: dict) -> dict:
        """POST a message and return the decoded response.

        Raises:
            AuthenticationError: If the API key is rejected
            DeliveryError: If the request fails or is not accepted
        """
        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise DeliveryError(f"Request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise DeliveryError(f"Request failed: {e}") from e

        if response.status_code in (401, 403):
            raise AuthenticationError(f"Authentication failed ({response.status_code})")
        if response.status_code not in (200, 201, 202):
            raise DeliveryError(f"Resend returned status {response.status_code}: {response.text}")

        try:
            return response.json()
        except ValueError:
            return {}
