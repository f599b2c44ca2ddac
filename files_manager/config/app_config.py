"""
Application Configuration

Environment-driven settings for the web process.
"""

import os

from ..domain.auth import DEFAULT_SESSION_TTL
from .redis_config import RedisConfig


class AppConfig:
    """Application configuration."""

    def __init__(self):
        self.api_version = os.getenv("API_VERSION", "v1")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # Blob storage root
        self.folder_path = os.getenv("FOLDER_PATH", "/tmp/files_manager")

        self.session_ttl = int(os.getenv("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL))

        # Sessions and catalog live on independent connections
        self.session_redis = RedisConfig()
        self.catalog_redis = RedisConfig(env_prefix="CATALOG_", default_db=1)
