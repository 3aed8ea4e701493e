"""Shared test fixtures."""

import pytest

from contact_relay.app import create_app
from contact_relay.config import (
    GmailConfig,
    LoggingConfig,
    ResendConfig,
    SendGridConfig,
    Settings,
    SmtpConfig,
)
from contact_relay.models import RenderedMessage
from contact_relay.providers.mock import MockEmailProvider

CONTACT_EMAIL = "contact@example.com"


@pytest.fixture
def settings():
    """Settings with no provider credentials."""
    return Settings(
        host="0.0.0.0",
        port=3000,
        contact_email=CONTACT_EMAIL,
        from_email="site@example.com",
        static_dir=None,
        send_timeout=5,
        resend=ResendConfig(api_key=None),
        sendgrid=SendGridConfig(api_key=None),
        gmail=GmailConfig(user=None, app_password=None),
        smtp=SmtpConfig(host="smtp.example.com", port=587, secure=False, user=None, password=None),
        logging=LoggingConfig(),
    )


@pytest.fixture
def rendered_message():
    """A rendered message as produced for a valid submission."""
    return RenderedMessage(
        subject="[Formation SST] Demande de devis – Jean Dupont",
        text_body="Nom : Jean Dupont\nEmail : jean@example.com\n\nMessage :\nBonjour",
        html_body="<p><strong>Nom :</strong> Jean Dupont</p>",
    )


@pytest.fixture
def valid_form():
    """Raw request body of a valid submission."""
    return {"nom": "Jean Dupont", "email": "jean@example.com", "message": "Bonjour"}


@pytest.fixture
def working_provider():
    return MockEmailProvider(to_email=CONTACT_EMAIL, name="primary")


@pytest.fixture
def client_factory(settings):
    """Build a Flask test client around a given provider chain."""

    def factory(providers=(), **overrides):
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        app = create_app(app_settings, providers=providers)
        app.config["TESTING"] = True
        return app.test_client()

    return factory
