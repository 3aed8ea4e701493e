"""Base email provider interface."""

from abc import ABC, abstractmethod
import logging

from ..models import RenderedMessage, SendResult, SendStatus

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class BaseEmailProvider(ABC):
    """Abstract base class for email providers.

    Providers are built once at startup and shared by concurrent requests,
    so ``send`` must not mutate provider state.
    """

    name = "base"

    def __init__(self, from_email: str, to_email: str, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the provider.

        Args:
            from_email: Sender email address
            to_email: Destination of every message
            timeout: Upper bound in seconds for one delivery attempt
        """
        self.from_email = from_email
        self.to_email = to_email
        self.timeout = timeout

    @abstractmethod
    def send(self, message: RenderedMessage, reply_to: str) -> SendResult:
        """Attempt to deliver a message once.

        Provider failures are reported through the returned result and are
        never raised.

        Args:
            message: Rendered message to send
            reply_to: Address replies should go to

        Returns:
            SendResult with status and details
        """
        pass

    def _success(self, message_id=None) -> SendResult:
        return SendResult(provider=self.name, status=SendStatus.SUCCESS, message_id=message_id)

    def _failure(self, reason: str) -> SendResult:
        return SendResult(provider=self.name, status=SendStatus.FAILED, error_reason=reason)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(from_email={self.from_email!r})"
