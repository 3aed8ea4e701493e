"""Contact form relay with ordered fallback across email providers."""

__version__ = "0.1.0"

from .exceptions import (
    ContactRelayError,
    ConfigurationError,
    RejectedInputError,
    ProviderError,
    AuthenticationError,
    DeliveryError,
    NoProviderConfiguredError,
    DeliveryExhaustedError,
)
from .models import (
    Submission,
    RenderedMessage,
    SendResult,
    SendStatus,
    DispatchResult,
    DispatchStatus,
)
from .validators import sanitize, validate_email_shape, validate_submission
from .renderer import escape_html, render_message
from .dispatcher import Dispatcher
from .relay import ContactRelay
from .config import Settings, load_settings
from .providers import build_providers

__all__ = [
    "ContactRelayError",
    "ConfigurationError",
    "RejectedInputError",
    "ProviderError",
    "AuthenticationError",
    "DeliveryError",
    "NoProviderConfiguredError",
    "DeliveryExhaustedError",
    "Submission",
    "RenderedMessage",
    "SendResult",
    "SendStatus",
    "DispatchResult",
    "DispatchStatus",
    "sanitize",
    "validate_email_shape",
    "validate_submission",
    "escape_html",
    "render_message",
    "Dispatcher",
    "ContactRelay",
    "Settings",
    "load_settings",
    "build_providers",
]
