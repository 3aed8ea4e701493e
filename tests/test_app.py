"""Tests for the HTTP API."""

import logging
from unittest.mock import patch

import pytest

from contact_relay.providers.mock import MockEmailProvider
from contact_relay.relay import ERROR_MESSAGE

CONTACT_EMAIL = "contact@example.com"


class TestContactEndpoint:
    """Tests for POST /api/contact."""

    def test_success(self, client_factory, working_provider, valid_form):
        client = client_factory([working_provider])

        response = client.post("/api/contact", json=valid_form)

        assert response.status_code == 200
        assert response.get_json() == {
            "success": True,
            "message": f"Message envoyé avec succès à {CONTACT_EMAIL}",
        }
        message, reply_to = working_provider.sent[0]
        assert reply_to == "jean@example.com"
        assert message.subject.endswith("Jean Dupont")

    def test_invalid_email(self, client_factory, working_provider, valid_form):
        client = client_factory([working_provider])
        valid_form["email"] = "not-an-email"

        response = client.post("/api/contact", json=valid_form)

        assert response.status_code == 400
        assert response.get_json() == {"success": False, "message": ERROR_MESSAGE}
        assert working_provider.sent == []

    def test_missing_fields(self, client_factory, working_provider):
        client = client_factory([working_provider])

        for body in ({}, {"nom": "Jean"}, {"nom": "Jean", "email": "jean@example.com"}):
            response = client.post("/api/contact", json=body)
            assert response.status_code == 400
            assert response.get_json()["success"] is False

        assert working_provider.sent == []

    @pytest.mark.parametrize(
        "field,value", [("nom", ""), ("email", ""), ("email", "jean@example"), ("message", "  ")]
    )
    def test_rejection_body_is_the_same_for_every_field(
        self, client_factory, working_provider, valid_form, field, value
    ):
        client = client_factory([working_provider])
        valid_form[field] = value

        response = client.post("/api/contact", json=valid_form)

        assert response.status_code == 400
        assert response.get_json() == {"success": False, "message": ERROR_MESSAGE}
        assert working_provider.sent == []

    def test_malformed_body(self, client_factory, working_provider):
        client = client_factory([working_provider])

        response = client.post("/api/contact", data="{not json", content_type="application/json")

        assert response.status_code == 400
        assert response.get_json() == {"success": False, "message": ERROR_MESSAGE}

    def test_non_object_body(self, client_factory, working_provider):
        client = client_factory([working_provider])

        response = client.post("/api/contact", json=["Jean", "jean@example.com", "Bonjour"])

        assert response.status_code == 400

    def test_no_provider_configured(self, client_factory, valid_form, caplog):
        client = client_factory([])

        with caplog.at_level(logging.WARNING):
            response = client.post("/api/contact", json=valid_form)

        assert response.status_code == 503
        assert response.get_json() == {"success": False, "message": ERROR_MESSAGE}
        assert "No email service configured" in caplog.text

    def test_all_providers_fail(self, client_factory, valid_form, caplog):
        chain = [MockEmailProvider(name="first", fail=True), MockEmailProvider(name="second", fail=True)]
        client = client_factory(chain)

        with caplog.at_level(logging.ERROR):
            response = client.post("/api/contact", json=valid_form)

        assert response.status_code == 500
        assert response.get_json() == {"success": False, "message": ERROR_MESSAGE}
        assert "first configured to fail" in caplog.text
        assert "second configured to fail" in caplog.text
        assert "first" not in response.get_data(as_text=True)

    def test_fallback_to_second_provider(self, client_factory, valid_form):
        failing = MockEmailProvider(name="first", fail=True)
        working = MockEmailProvider(name="second")
        unused = MockEmailProvider(name="third")
        client = client_factory([failing, working, unused])

        response = client.post("/api/contact", json=valid_form)

        assert response.status_code == 200
        assert len(working.sent) == 1
        assert unused.sent == []

    def test_unexpected_error(self, client_factory, working_provider, valid_form):
        client = client_factory([working_provider])

        with patch("contact_relay.relay.render_message", side_effect=RuntimeError("bug")):
            response = client.post("/api/contact", json=valid_form)

        assert response.status_code == 500
        assert response.get_json() == {"success": False, "message": ERROR_MESSAGE}

    def test_cors_headers(self, client_factory, working_provider, valid_form):
        client = client_factory([working_provider])

        response = client.post(
            "/api/contact", json=valid_form, headers={"Origin": "https://example.org"}
        )

        assert response.headers.get("Access-Control-Allow-Origin") in ("*", "https://example.org")


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health_lists_providers(self, client_factory):
        client = client_factory([MockEmailProvider(name="a"), MockEmailProvider(name="b")])

        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy", "providers": ["a", "b"]}


class TestStaticFiles:
    """Tests for serving the site next to the API."""

    def test_serves_index_and_assets(self, client_factory, tmp_path):
        (tmp_path / "index.html").write_text("<h1>Formation SST</h1>")
        (tmp_path / "style.css").write_text("body {}")
        client = client_factory(static_dir=str(tmp_path))

        assert b"Formation SST" in client.get("/").data
        assert client.get("/style.css").status_code == 200
        assert client.get("/missing.js").status_code == 404

    def test_disabled_without_static_dir(self, client_factory):
        client = client_factory()
        assert client.get("/").status_code == 404
