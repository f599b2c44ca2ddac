"""
Redis Configuration

Configures Redis connection settings and provides factory functions for
connection managers. Managers are explicit handles owned by the app
factory; nothing here is a module-level singleton.
"""

import os
from typing import Optional

import redis

from ..infrastructure.redis_repository import RedisConnectionManager


class RedisConfig:
    """
    Redis configuration settings.

    Args:
        env_prefix: Prefix for the environment variables, e.g. "CATALOG_"
            reads CATALOG_REDIS_HOST, CATALOG_REDIS_DB, ...
        default_db: Database number used when none is configured
    """

    def __init__(self, env_prefix: str = "", default_db: int = 0):
        def env(name: str, default=None, inherit: bool = True):
            # Prefixed variables fall back to the unprefixed ones
            value = os.getenv(f"{env_prefix}{name}")
            if value is None and inherit:
                value = os.getenv(name)
            return default if value is None else value

        self.host = env("REDIS_HOST", "localhost")
        self.port = int(env("REDIS_PORT", 6379))
        self.db = int(env("REDIS_DB", default_db, inherit=False))
        self.password = env("REDIS_PASSWORD")
        self.max_connections = int(env("REDIS_MAX_CONNECTIONS", 20))
        self.socket_timeout = float(env("REDIS_SOCKET_TIMEOUT", 5))

        # Redis URL format: redis://[:password@]host:port/db
        self.url = env("REDIS_URL", inherit=False)
        if self.url:
            connection_params = redis.connection.parse_url(self.url)
            self.host = connection_params.get("host", self.host)
            self.port = connection_params.get("port", self.port)
            self.db = connection_params.get("db", self.db)
            self.password = connection_params.get("password", self.password)


def create_redis_manager(config: Optional[RedisConfig] = None) -> RedisConnectionManager:
    """
    Create a Redis connection manager.

    Args:
        config: Redis configuration, uses default if None

    Returns:
        RedisConnectionManager instance
    """
    if config is None:
        config = RedisConfig()

    return RedisConnectionManager(
        host=config.host,
        port=config.port,
        db=config.db,
        password=config.password,
        max_connections=config.max_connections,
        socket_timeout=config.socket_timeout,
    )
