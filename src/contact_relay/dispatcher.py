"""Ordered fallback delivery across configured providers."""

import logging
from typing import Iterable, Tuple

from .exceptions import DeliveryExhaustedError, NoProviderConfiguredError
from .models import DispatchResult, DispatchStatus, RenderedMessage, SendResult, SendStatus
from .providers.base import BaseEmailProvider

logger = logging.getLogger(__name__)


class Dispatcher:
    """Hands a message to the first provider that accepts it."""

    def __init__(self, providers: Iterable[BaseEmailProvider] = ()):
        """Initialize the dispatcher.

        Args:
            providers: Providers in priority order
        """
        self.providers: Tuple[BaseEmailProvider, ...] = tuple(providers)

    @property
    def provider_names(self):
        return [p.name for p in self.providers]

    def dispatch(self, message: RenderedMessage, reply_to: str) -> DispatchResult:
        """Try each provider in order until one succeeds.

        A failed attempt is logged and never retried; the next provider is
        tried instead. Remaining providers are skipped after a success.

        Args:
            message: Rendered message
            reply_to: Submitter's address

        Returns:
            DispatchResult describing the outcome
        """
        if not self.providers:
            return DispatchResult(status=DispatchStatus.NO_PROVIDER)

        attempts = []
        for provider in self.providers:
            result = self._attempt(provider, message, reply_to)
            attempts.append(result)
            if result.ok:
                return DispatchResult(
                    status=DispatchStatus.SUCCEEDED, provider=provider.name, attempts=attempts
                )
            logger.error(f"Provider {provider.name} failed: {result.error_reason}")

        return DispatchResult(status=DispatchStatus.FAILED, attempts=attempts)

    def dispatch_or_raise(self, message: RenderedMessage, reply_to: str) -> DispatchResult:
        """Like ``dispatch`` but raise on anything other than success.

        Raises:
            NoProviderConfiguredError: If the chain is empty
            DeliveryExhaustedError: If every provider failed
        """
        result = self.dispatch(message, reply_to)
        if result.status == DispatchStatus.NO_PROVIDER:
            raise NoProviderConfiguredError()
        if result.status == DispatchStatus.FAILED:
            raise DeliveryExhaustedError(result.attempts)
        return result

    @staticmethod
    def _attempt(provider: BaseEmailProvider, message: RenderedMessage, reply_to: str) -> SendResult:
        try:
            return provider.send(message, reply_to)
        except Exception as e:
            logger.exception(f"Provider {provider.name} raised unexpectedly")
            return SendResult(provider=provider.name, status=SendStatus.FAILED, error_reason=str(e))
