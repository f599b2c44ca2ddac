"""
Application Factory

Creates and configures the Flask application with all dependencies.
Store connections are created here, injected into every component, and
released through close_connections() at shutdown.
"""

import logging
from typing import List, Optional

from flask import Flask
from flask_cors import CORS

from .application.dependency_container import DependencyContainer
from .application.file_service import FileService
from .application.processing_service import ProcessingService
from .application.status_service import StatusService
from .application.user_service import UserService
from .config.app_config import AppConfig
from .config.celery_config import make_celery
from .config.redis_config import create_redis_manager
from .domain.auth import AuthGateway, CredentialVerifier, PasswordHasher, SessionStore
from .domain.catalog import FileCatalog, FileEntryRepository
from .domain.file_storage import IFileStorageRepository, UploadPipeline
from .domain.processing import JobQueue
from .domain.users import UserRepository
from .infrastructure import (
    BcryptPasswordHasher,
    CeleryJobQueue,
    ImageThumbnailer,
    LocalFileStorageRepository,
    RedisConnectionManager,
    RedisFileEntryRepository,
    RedisRepository,
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
        container: Pre-wired container; when None, Redis, Celery and the
            filesystem adapters are wired from config

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig()

    _configure_logging(config)

    app = Flask(__name__)
    app.config["RESTX_MASK_SWAGGER"] = False
    app.config["RESTX_ERROR_404_HELP"] = False

    CORS(
        app,
        resources={
            r"/*": {
                "origins": "*",
                "methods": ["GET", "POST", "PUT", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization", "X-Token"],
                "max_age": 3600,
            }
        },
    )

    app.redis_managers = []
    if container is None:
        app.celery = make_celery(app)
        app.redis_managers = _create_redis_managers(config)
        container = build_container(config, app.celery, *app.redis_managers)
    else:
        app.celery = None

    app.container = container

    _register_blueprints(app, config)

    return app


def _configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _create_redis_managers(config: AppConfig) -> List[RedisConnectionManager]:
    """Session and catalog connection managers, in that order."""
    return [
        create_redis_manager(config.session_redis),
        create_redis_manager(config.catalog_redis),
    ]


def build_container(
    config: AppConfig,
    celery,
    session_manager: RedisConnectionManager,
    catalog_manager: RedisConnectionManager,
) -> DependencyContainer:
    """
    Wire every adapter and service into a DependencyContainer.

    Shared by the web process and the Celery worker.

    Args:
        config: Application configuration
        celery: Celery instance used to publish jobs
        session_manager: Connection for the session store
        catalog_manager: Connection for users and entries

    Returns:
        Container with all services registered as singletons
    """
    container = DependencyContainer()

    # Infrastructure adapters
    session_store = RedisSessionStore(RedisRepository(session_manager.client))
    catalog_repo = RedisRepository(catalog_manager.client, key_prefix="files_manager")
    user_repository = RedisUserRepository(catalog_repo)
    entry_repository = RedisFileEntryRepository(catalog_repo)
    storage_repository = LocalFileStorageRepository(config.folder_path)
    password_hasher = BcryptPasswordHasher()
    job_queue = CeleryJobQueue(celery)

    container.register_singleton(SessionStore, session_store)
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(FileEntryRepository, entry_repository)
    container.register_singleton(IFileStorageRepository, storage_repository)
    container.register_singleton(PasswordHasher, password_hasher)
    container.register_singleton(JobQueue, job_queue)

    # Domain services
    auth_gateway = AuthGateway(
        session_store,
        CredentialVerifier(user_repository, password_hasher),
        user_repository,
        session_ttl=config.session_ttl,
    )
    upload_pipeline = UploadPipeline(storage_repository, job_queue)
    file_catalog = FileCatalog(entry_repository, upload_pipeline, storage_repository)

    container.register_singleton(AuthGateway, auth_gateway)
    container.register_singleton(UploadPipeline, upload_pipeline)
    container.register_singleton(FileCatalog, file_catalog)

    # Application services
    container.register_singleton(
        UserService, UserService(user_repository, password_hasher, auth_gateway, job_queue)
    )
    container.register_singleton(FileService, FileService(auth_gateway, file_catalog))
    container.register_singleton(
        StatusService, StatusService(session_store, user_repository, entry_repository)
    )
    container.register_singleton(
        ProcessingService,
        ProcessingService(entry_repository, user_repository, ImageThumbnailer()),
    )

    logger.info("Application services initialized")
    return container


def _register_blueprints(app: Flask, config: AppConfig) -> None:
    from .api.v1 import api_v1_bp

    app.register_blueprint(api_v1_bp)

    logger.info(
        f"API {config.api_version} registered at /api/{config.api_version} "
        f"with Swagger UI at /api/{config.api_version}/docs"
    )


def close_connections(app: Flask) -> None:
    """Release the store connections owned by app."""
    for manager in getattr(app, "redis_managers", []):
        manager.close()
    logger.info("Store connections closed")
