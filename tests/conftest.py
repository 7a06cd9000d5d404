"""Shared fixtures for the demo and provider service tests."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest
from flask import Flask, request
from werkzeug.serving import make_server

import demo_server
import provider_server
from provider_client import ProviderClient


@pytest.fixture
def provider_app():
    return provider_server.create_app()


@pytest.fixture
def provider_test_client(provider_app):
    return provider_app.test_client()


@pytest.fixture
def fake_provider_client() -> MagicMock:
    client = MagicMock(spec=ProviderClient)
    client.base_url = "http://provider.test"
    return client


@pytest.fixture
def demo_app(fake_provider_client):
    return demo_server.create_app(provider_client=fake_provider_client, config={})


@pytest.fixture
def demo_test_client(demo_app):
    return demo_app.test_client()


def serve(app):
    """Run a Flask app on a real local socket; yields its base URL."""
    server = make_server("127.0.0.1", 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.port}"
    finally:
        server.shutdown()
        thread.join(timeout=5)


@pytest.fixture
def live_provider():
    yield from serve(provider_server.create_app())


@pytest.fixture
def live_provider_without_charset():
    """A provider that answers bare text/plain, leaving the charset to the caller."""
    app = Flask(__name__)

    @app.get("/myfeignreceiver")
    def my_feign_receiver():
        body = ("delivered: " + request.args["myValue"]).encode("utf-8")
        return body, 200, {"Content-Type": "text/plain"}

    yield from serve(app)
