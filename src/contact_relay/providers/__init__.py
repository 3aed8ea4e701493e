"""Email provider implementations."""

import logging
from typing import Tuple

from .base import BaseEmailProvider
from .mock import MockEmailProvider
from .resend import ResendProvider
from .sendgrid import SendGridProvider
from .smtp import GmailProvider, SmtpProvider

logger = logging.getLogger(__name__)


def build_providers(settings) -> Tuple[BaseEmailProvider, ...]:
    """Create the configured providers in priority order.

    Order is Resend, SendGrid, Gmail, SMTP. Providers without credentials
    are left out.

    Args:
        settings: Application settings

    Returns:
        Tuple of provider instances, possibly empty
    """
    providers = []
    to_email = settings.contact_email
    timeout = settings.send_timeout

    if settings.resend.configured:
        providers.append(
            ResendProvider(settings.from_email, to_email, settings.resend.api_key, timeout=timeout)
        )
    if settings.sendgrid.configured:
        providers.append(
            SendGridProvider(settings.from_email, to_email, settings.sendgrid.api_key, timeout=timeout)
        )
    if settings.gmail.configured:
        providers.append(
            GmailProvider(to_email, settings.gmail.user, settings.gmail.app_password, timeout=timeout)
        )
    if settings.smtp.configured:
        smtp = settings.smtp
        providers.append(
            SmtpProvider(
                to_email,
                host=smtp.host,
                port=smtp.port,
                username=smtp.user,
                password=smtp.password,
                secure=smtp.secure,
                timeout=timeout,
            )
        )

    return tuple(providers)


__all__ = [
    "BaseEmailProvider",
    "MockEmailProvider",
    "ResendProvider",
    "SendGridProvider",
    "GmailProvider",
    "SmtpProvider",
    "build_providers",
]
