"""
Application Factory

Builds the Flask app for the import API. Each call returns a fresh app
with its own container, so tests can build as many as they need.
"""

import logging
import os
from typing import Dict, List, Optional, Tuple

from flask import Flask, jsonify
from flask_cors import CORS

from catalog_import.application.dependency_container import DependencyContainer
from catalog_import.application.import_service import ImportService
from catalog_import.config import configure_logging
from catalog_import.config.import_config import ImportConfig, create_youtube_client
from catalog_import.config.redis_config import (
    get_redis_repository,
    init_redis,
    redis_health_check,
)
from catalog_import.domain.content_import import AdapterRegistry, ICatalogRepository
from catalog_import.infrastructure.memory_catalog_repository import InMemoryCatalogRepository
from catalog_import.infrastructure.redis_catalog_repository import RedisCatalogRepository
from catalog_import.infrastructure.youtube import YouTubeAdapter

logger = logging.getLogger(__name__)


class AppConfig:
    """Web layer settings read from the environment."""

    def __init__(self):
        self.api_version = os.getenv("API_VERSION", "v1")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


def create_app(
    config: Optional[AppConfig] = None,
    import_config: Optional[ImportConfig] = None,
) -> Flask:
    """
    Create the Flask application.

    Args:
        config: Web layer settings, read from the environment if None
        import_config: Import pipeline settings, read from the environment if None
    """
    config = config or AppConfig()
    import_config = import_config or ImportConfig()

    configure_logging(config.log_level)

    app = Flask(__name__)
    CORS(
        app,
        origins=config.cors_origins,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.container = _build_container(import_config)

    from catalog_import.api.v1 import api_v1_bp

    app.register_blueprint(api_v1_bp)
    logger.info(f"Import API mounted at /api/{config.api_version}")

    @app.route("/health", methods=["GET"])
    def health():
        body, status_code = _catalog_store_health(import_config)
        return jsonify(body), status_code

    return app


def _create_catalog_repository(import_config: ImportConfig) -> ICatalogRepository:
    """Catalog store selected by CATALOG_STORE."""
    if import_config.catalog_store == "memory":
        logger.warning("Using in-memory catalog store; records are lost on restart")
        return InMemoryCatalogRepository()

    init_redis()
    return RedisCatalogRepository(get_redis_repository(import_config.catalog_key_prefix))


def _build_container(import_config: ImportConfig) -> DependencyContainer:
    """
    Wire the catalog store, the YouTube adapter and the import service.

    The API layer resolves ``ImportService`` from the returned container;
    the store and registry are registered too so tests can inspect them.
    """
    catalog_repository = _create_catalog_repository(import_config)
    registry = AdapterRegistry(YouTubeAdapter(create_youtube_client(import_config)))

    container = DependencyContainer()
    container.register_singleton(ICatalogRepository, catalog_repository)
    container.register_singleton(AdapterRegistry, registry)
    container.register_factory(
        ImportService,
        lambda: ImportService(
            container.resolve(AdapterRegistry),
            container.resolve(ICatalogRepository),
            max_workers=import_config.max_workers,
        ),
    )

    logger.info(
        f"Import services wired: {len(registry)} adapter(s), "
        f"{import_config.catalog_store} catalog store"
    )
    return container


def _catalog_store_health(import_config: ImportConfig) -> Tuple[Dict[str, str], int]:
    if import_config.catalog_store != "redis":
        return {"status": "ok", "catalog_store": import_config.catalog_store}, 200

    if redis_health_check():
        return {"status": "ok", "catalog_store": "redis", "redis": "connected"}, 200
    return {"status": "degraded", "catalog_store": "redis", "redis": "disconnected"}, 503
