"""Mock email provider for tests and dry runs."""

from ..models import RenderedMessage, SendResult
from .base import BaseEmailProvider


class MockEmailProvider(BaseEmailProvider):
    """Provider that records messages instead of sending them."""

    name = "mock"

    def __init__(
        self,
        from_email: str = "mock@example.com",
        to_email: str = "contact@example.com",
        fail: bool = False,
        name: str = None,
    ):
        super().__init__(from_email, to_email)
        self.fail = fail
        if name:
            self.name = name
        self.sent = []

    def send(self, message: RenderedMessage, reply_to: str) -> SendResult:
        """Record the message, then succeed or fail as configured."""
        self.sent.append((message, reply_to))
        if self.fail:
            return self._failure(f"{self.name} configured to fail")
        return self._success(f"mock-{len(self.sent)}")
