"""
API v1 - Files Manager REST API

This module contains the versioned API endpoints with OpenAPI/Swagger documentation.
"""

import os

from flask import Blueprint
from flask_restx import Api

# Get API version from environment
API_VERSION = os.getenv("API_VERSION", "v1")

# Create blueprint for API v1
api_v1_bp = Blueprint("api_v1", __name__, url_prefix=f"/api/{API_VERSION}")

authorizations = {
    "token": {"type": "apiKey", "in": "header", "name": "X-Token"},
    "basic": {"type": "basic"},
}

# Initialize Flask-RESTX API with Swagger documentation
api = Api(
    api_v1_bp,
    version="1.0",
    title="Files Manager API",
    description="Upload, organize, publish and view files; thumbnails for images",
    doc="/docs",  # Swagger UI will be available at /api/v1/docs
    authorizations=authorizations,
)

# Import namespaces after api is created to avoid circular imports
from .namespaces import auth_ns, files_ns, status_ns, users_ns  # noqa: E402

# Register namespaces; each carries its full resource paths
api.add_namespace(status_ns)
api.add_namespace(users_ns)
api.add_namespace(auth_ns)
api.add_namespace(files_ns)
