"""CLI commands for the contact relay."""

import logging
import sys
from typing import Optional

import click

from .config import load_settings
from .dispatcher import Dispatcher
from .exceptions import ContactRelayError, DeliveryExhaustedError, RejectedInputError
from .logging import setup_logging
from .providers import MockEmailProvider, build_providers
from .relay import ContactRelay

logger = logging.getLogger(__name__)


def _load(env_file: Optional[str]):
    try:
        settings = load_settings(env_file)
    except ContactRelayError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    setup_logging(settings.logging)
    return settings


@click.group()
def main():
    """Contact form relay."""
    pass


@main.command()
@click.option("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port (default: PORT or 3000)")
@click.option("--env-file", type=click.Path(exists=True), help=".env file path")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode")
def serve(host: Optional[str], port: Optional[int], env_file: Optional[str], debug: bool):
    """Run the HTTP server."""
    from .app import create_app

    settings = _load(env_file)
    app = create_app(settings)

    host = host or settings.host
    port = port or settings.port
    logger.info(f"Server started on http://localhost:{port}")
    app.run(host=host, port=port, debug=debug)


@main.command()
@click.option("--env-file", type=click.Path(exists=True), help=".env file path")
def providers(env_file: Optional[str]):
    """List configured providers in priority order."""
    settings = _load(env_file)
    chain = build_providers(settings)

    if not chain:
        click.echo("No email provider configured")
        sys.exit(1)

    click.echo(f"Delivering to {settings.contact_email} via ({len(chain)}):")
    for i, provider in enumerate(chain, start=1):
        click.echo(f"  {i}. {provider.name} (from {provider.from_email})")


@main.command()
@click.option("--name", "nom", required=True, help="Sender name")
@click.option("--email", required=True, help="Sender email address")
@click.option("--message", required=True, help="Message body")
@click.option("--env-file", type=click.Path(exists=True), help=".env file path")
@click.option("--dry-run", is_flag=True, help="Use a mock provider instead of the configured ones")
def send_test(nom: str, email: str, message: str, env_file: Optional[str], dry_run: bool):
    """Send one contact message through the provider chain."""
    settings = _load(env_file)
    chain = (MockEmailProvider(to_email=settings.contact_email),) if dry_run else build_providers(settings)
    relay = ContactRelay(Dispatcher(chain), settings.contact_email)

    try:
        result = relay.relay({"nom": nom, "email": email, "message": message})
    except RejectedInputError as e:
        click.echo(f"Error: invalid {e.field} ({e.reason})", err=True)
        sys.exit(1)
    except DeliveryExhaustedError as e:
        _echo_attempts(e.attempts)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ContactRelayError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _echo_attempts(result.attempts)
    click.echo(relay.success_message)


def _echo_attempts(attempts):
    for attempt in attempts:
        line = f"  {attempt.provider}: {attempt.status.value}"
        if attempt.error_reason:
            line += f" ({attempt.error_reason})"
        click.echo(line)


if __name__ == "__main__":
    main()
