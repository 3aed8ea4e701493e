"""Flask application exposing the contact endpoint."""

import logging
from typing import Iterable, Optional

from flask import Flask, abort, jsonify, request, send_from_directory
from flask_cors import CORS

from .config import Settings, load_settings
from .dispatcher import Dispatcher
from .exceptions import DeliveryExhaustedError, NoProviderConfiguredError, RejectedInputError
from .providers import BaseEmailProvider, build_providers
from .relay import ERROR_MESSAGE, ContactRelay

logger = logging.getLogger(__name__)


def _error(status: int):
    return jsonify({"success": False, "message": ERROR_MESSAGE}), status


def create_app(
    settings: Optional[Settings] = None,
    providers: Optional[Iterable[BaseEmailProvider]] = None,
) -> Flask:
    """Factory function to create and configure the Flask app.

    Args:
        settings: Application settings (loaded from the environment if omitted)
        providers: Provider chain (built from settings if omitted)

    Returns:
        Configured Flask app
    """
    if settings is None:
        settings = load_settings()
    if providers is None:
        providers = build_providers(settings)

    app = Flask(__name__, static_folder=None)
    CORS(app)

    dispatcher = Dispatcher(providers)
    app.settings = settings
    app.relay = ContactRelay(dispatcher, settings.contact_email)
    _log_provider_chain(dispatcher)

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({"status": "healthy", "providers": dispatcher.provider_names}), 200

    @app.route("/api/contact", methods=["POST"])
    def contact():
        """Validate a contact submission and relay it by email."""
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                data = {}
            app.relay.relay(data)
            return jsonify({"success": True, "message": app.relay.success_message}), 200
        except RejectedInputError as e:
            logger.warning(f"POST /api/contact rejected: {e.field} {e.reason}")
            return _error(400)
        except NoProviderConfiguredError:
            return _error(503)
        except DeliveryExhaustedError as e:
            logger.error(f"POST /api/contact: {e}")
            return _error(500)
        except Exception:
            logger.exception("POST /api/contact: unexpected error")
            return _error(500)

    static_path = settings.static_path
    if static_path is not None:
        _register_static_routes(app, str(static_path.resolve()))

    return app


def _register_static_routes(app: Flask, directory: str) -> None:
    """Serve the site's files next to the API."""

    @app.route("/", methods=["GET"])
    def index():
        return send_from_directory(directory, "index.html")

    @app.route("/<path:filename>", methods=["GET"])
    def static_files(filename):
        if filename.startswith("api/"):
            abort(404)
        return send_from_directory(directory, filename)


def _log_provider_chain(dispatcher: Dispatcher) -> None:
    if dispatcher.providers:
        logger.info(f"Email delivery enabled: {', '.join(dispatcher.provider_names)}")
    else:
        logger.warning(
            "No email service configured. Set RESEND_API_KEY, SENDGRID_API_KEY, GMAIL_* or SMTP_* in .env"
        )
