"""Validate, render and dispatch a contact submission."""

import logging
from typing import Any, Mapping, Optional

from .dispatcher import Dispatcher
from .exceptions import NoProviderConfiguredError
from .models import DispatchResult
from .renderer import render_message
from .validators import validate_submission

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Message envoyé avec succès à {contact_email}"
ERROR_MESSAGE = "Erreur lors de l'envoi du message"


class ContactRelay:
    """High-level relay that coordinates validation, rendering and delivery."""

    def __init__(self, dispatcher: Dispatcher, contact_email: str):
        self.dispatcher = dispatcher
        self.contact_email = contact_email

    @property
    def success_message(self) -> str:
        return SUCCESS_MESSAGE.format(contact_email=self.contact_email)

    def relay(self, data: Optional[Mapping[str, Any]]) -> DispatchResult:
        """Run one submission through the whole pipeline.

        Args:
            data: Raw request fields

        Returns:
            Successful DispatchResult

        Raises:
            RejectedInputError: If validation fails; nothing is sent
            NoProviderConfiguredError: If no provider is configured
            DeliveryExhaustedError: If every provider failed
        """
        submission = validate_submission(data or {})
        message = render_message(submission)

        try:
            result = self.dispatcher.dispatch_or_raise(message, submission.email)
        except NoProviderConfiguredError:
            logger.warning(
                "No email service configured (RESEND_API_KEY, SENDGRID_API_KEY, GMAIL_* or SMTP_*); "
                f"message from {submission.name} <{submission.email}> not sent"
            )
            raise

        logger.info(f"Contact message from {submission.email} delivered via {result.provider}")
        return result
