"""SMTP mailbox providers."""

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid

from ..models import RenderedMessage, SendResult
from ..exceptions import AuthenticationError, DeliveryError
from .base import BaseEmailProvider, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class SmtpProvider(BaseEmailProvider):
    """Authenticated SMTP provider.

    The authenticated user is also the sender, since most mailbox hosts
    refuse to relay for any other address.
    """

    name = "smtp"

    def __init__(
        self,
        to_email: str,
        host: str,
        port: int,
        username: str,
        password: str,
        secure: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize SMTP provider.

        Args:
            to_email: Destination address
            host: SMTP server host
            port: SMTP server port
            username: Login, also used as sender
            password: Password or app password
            secure: Connect with implicit TLS; STARTTLS is used otherwise
            timeout: Socket timeout in seconds
        """
        super().__init__(username, to_email, timeout)
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.secure = secure

    def send(self, message: RenderedMessage, reply_to: str) -> SendResult:
        """Send email over SMTP."""
        mime_message = self._create_mime_message(message, reply_to)
        try:
            self._deliver(mime_message)
        except (AuthenticationError, DeliveryError) as e:
            logger.error(f"{self.name.upper()} error: {e}")
            return self._failure(str(e))
        except Exception as e:
            logger.error(f"Unexpected {self.name.upper()} error: {e}")
            return self._failure(str(e))

        logger.info(f"Email sent to {self.to_email} via {self.host}")
        return self._success(mime_message["Message-ID"])

    def _create_mime_message(self, message: RenderedMessage, reply_to: str) -> MIMEMultipart:
        """Create a multipart/alternative MIME message."""
        mime_message = MIMEMultipart("alternative")
        mime_message["From"] = self.from_email
        mime_message["To"] = self.to_email
        mime_message["Reply-To"] = reply_to
        mime_message["Subject"] = message.subject
        mime_message["Message-ID"] = make_msgid()

        mime_message.attach(MIMEText(message.text_body, "plain", "utf-8"))
        mime_message.attach(MIMEText(message.html_body, "html", "utf-8"))
        return mime_message

    def _connect(self) -> smtplib.SMTP:
        if self.secure:
            return smtplib.SMTP_SSL(
                self.host, self.port, timeout=self.timeout, context=ssl.create_default_context()
            )
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def _deliver(self, mime_message: MIMEMultipart) -> None:
        """Open a connection, authenticate and send.

        Raises:
            AuthenticationError: If the server rejects the credentials
            DeliveryError: If the connection or the transaction fails
        """
        try:
            with self._connect() as server:
                if not self.secure:
                    server.starttls(context=ssl.create_default_context())
                server.login(self.username, self.password)
                server.send_message(mime_message)
        except smtplib.SMTPAuthenticationError as e:
            raise AuthenticationError(f"Authentication failed for {self.username}") from e
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(f"SMTP delivery via {self.host}:{self.port} failed: {e}") from e


class GmailProvider(SmtpProvider):
    """Gmail mailbox authenticated with an app password."""

    name = "gmail"

    def __init__(self, to_email: str, username: str, app_password: str, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(
            to_email,
            host="smtp.gmail.com",
            port=465,
            username=username,
            password=app_password,
            secure=True,
            timeout=timeout,
        )
