"""
Application Factory

Creates and configures the Flask application with all dependencies.
This factory pattern improves testability by allowing dependency injection
and configuration overrides.
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from files_manager.application import (
    AuthService,
    DependencyContainer,
    FileService,
    IdentityResolver,
    StatsService,
    UserService,
)
from files_manager.config.app_config import AppConfig
from files_manager.config.redis_config import get_redis_repository, init_redis, redis_health_check
from files_manager.domain.auth import ISessionStore, IUserRepository
from files_manager.domain.files import IContentStore, IFileMetadataRepository
from files_manager.infrastructure import (
    ContentStoreFactory,
    RedisFileRepository,
    RedisSessionStore,
    RedisUserRepository,
)

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    container: Optional[DependencyContainer] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, uses default if None
        container: Pre-built container; when None one is wired against Redis

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig()

    app = Flask(__name__)

    CORS(
        app,
        resources={
            r"/*": {
                "origins": "*",
                "methods": ["GET", "POST", "PUT", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization", "X-Token"],
            }
        },
    )

    if container is None:
        container = build_container(config)
    app.container = container

    _register_blueprints(app, config)

    return app


def build_container(config: AppConfig) -> DependencyContainer:
    """
    Wire repositories and services into a DependencyContainer.

    PATTERN:
    --------
    1. Initialize Redis and the content store
    2. Register infrastructure adapters under their domain interfaces
    3. Register application services

    Args:
        config: Application configuration

    Returns:
        Populated DependencyContainer
    """
    container = DependencyContainer()

    init_redis()
    redis_repo = get_redis_repository()

    session_store = RedisSessionStore(redis_repo)
    user_repository = RedisUserRepository(redis_repo)
    file_repository = RedisFileRepository(redis_repo)
    content_store = ContentStoreFactory.create_storage(config.folder_path)

    container.register_singleton(ISessionStore, session_store)
    container.register_singleton(IUserRepository, user_repository)
    container.register_singleton(IFileMetadataRepository, file_repository)
    container.register_singleton(IContentStore, content_store)

    identity_resolver = IdentityResolver(session_store, user_repository)
    container.register_singleton(IdentityResolver, identity_resolver)
    container.register_singleton(
        AuthService, AuthService(session_store, user_repository, config.session_ttl)
    )
    container.register_singleton(
        UserService, UserService(user_repository, identity_resolver)
    )
    container.register_singleton(
        FileService, FileService(identity_resolver, file_repository, content_store)
    )
    container.register_singleton(
        StatsService, StatsService(user_repository, file_repository, redis_health_check)
    )

    logger.info("Application services initialized with DependencyContainer")
    return container


def _register_blueprints(app: Flask, config: AppConfig) -> None:
    """
    Register API blueprints.

    Args:
        app: Flask application
        config: Application configuration
    """
    from files_manager.api.v1 import api_v1_bp

    app.register_blueprint(api_v1_bp, url_prefix=config.api_prefix or None)

    logger.info(
        f"API registered at '{config.api_prefix or '/'}' "
        f"with Swagger UI at {config.api_prefix}/docs"
    )
