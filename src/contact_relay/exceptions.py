"""Custom exceptions for the contact relay."""


class ContactRelayError(Exception):
    """Base exception for all contact relay errors."""

    pass


class ConfigurationError(ContactRelayError):
    """Raised when settings cannot be loaded."""

    pass


class RejectedInputError(ContactRelayError):
    """Raised when a submission fails validation.

    ``field`` names the check that failed. It is meant for server-side logs
    and must not be echoed back to the client.
    """

    def __init__(self, field: str, reason: str = "empty"):
        super().__init__(f"Rejected submission: {field} {reason}")
        self.field = field
        self.reason = reason


class ProviderError(ContactRelayError):
    """Raised when there's an error with an email provider."""

    pass


class AuthenticationError(ProviderError):
    """Raised when authentication with the provider fails."""

    pass


class DeliveryError(ProviderError):
    """Raised when email delivery fails."""

    pass


class NoProviderConfiguredError(ContactRelayError):
    """Raised when no delivery provider is configured."""

    def __init__(self):
        super().__init__("No email provider configured")


class DeliveryExhaustedError(ContactRelayError):
    """Raised when every configured provider failed to deliver."""

    def __init__(self, attempts=None):
        self.attempts = list(attempts or [])
        names = ", ".join(a.provider for a in self.attempts)
        super().__init__(f"All providers failed: {names}")
