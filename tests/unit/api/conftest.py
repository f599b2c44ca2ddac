"""
Fixtures for API tests: a Flask app serving the v1 namespaces on top of
the in-memory container from the root conftest.
"""

import pytest
from flask import Flask
from flask_restx import Api

from files_manager.api.v1.namespaces import auth_ns, files_ns, status_ns, users_ns
from tests.fixtures import basic_header


@pytest.fixture
def flask_app(container):
    """Create Flask app for testing."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["RESTX_ERROR_404_HELP"] = False

    api = Api(app, prefix="/api/v1", doc=False)
    api.add_namespace(status_ns)
    api.add_namespace(users_ns)
    api.add_namespace(auth_ns)
    api.add_namespace(files_ns)

    app.container = container
    return app


@pytest.fixture
def client(flask_app):
    """Create test client."""
    return flask_app.test_client()


@pytest.fixture
def sign_up(client):
    """Register a user through the API and return a session token."""

    def register_and_connect(email="bob@dylan.com", password="toto1234!"):
        response = client.post("/api/v1/users", json={"email": email, "password": password})
        assert response.status_code == 201
        response = client.get(
            "/api/v1/connect", headers={"Authorization": basic_header(email, password)}
        )
        assert response.status_code == 200
        return response.get_json()["token"]

    return register_and_connect
