"""
API v1 - Catalog Import REST API

Versioned import endpoints with OpenAPI/Swagger documentation.
"""

import os

from flask import Blueprint
from flask_restx import Api

from .namespaces import import_ns

API_VERSION = os.getenv("API_VERSION", "v1")

api_v1_bp = Blueprint("api_v1", __name__, url_prefix=f"/api/{API_VERSION}")

api = Api(
    api_v1_bp,
    version="1.0",
    title="Catalog Import API",
    description="Imports videos and channels from external platforms into the catalog",
    doc="/docs",  # Swagger UI will be available at /api/v1/docs
)

api.add_namespace(import_ns, path="/import")
