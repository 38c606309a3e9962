"""
API v1 - Files Manager REST API

This module contains the API endpoints with OpenAPI/Swagger documentation.
"""

from flask import Blueprint
from flask_restx import Api

api_v1_bp = Blueprint("api_v1", __name__)

authorizations = {
    "token": {"type": "apiKey", "in": "header", "name": "X-Token"},
    "basic": {"type": "basic"},
}

api = Api(
    api_v1_bp,
    version="1.0",
    title="Files Manager API",
    description="Token-authenticated file storage with folders and public sharing",
    doc="/docs",
    authorizations=authorizations,
)

# Import namespaces after api is created to avoid circular imports
from .namespaces import auth_ns, files_ns, system_ns, users_ns  # noqa: E402

api.add_namespace(system_ns)
api.add_namespace(auth_ns)
api.add_namespace(users_ns)
api.add_namespace(files_ns)
