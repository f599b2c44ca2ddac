"""
Infrastructure Layer

Redis, filesystem, bcrypt, Celery and Pillow adapters for the domain
interfaces.
"""

from .bcrypt_password_hasher import BcryptPasswordHasher
from .celery_job_queue import CeleryJobQueue
from .image_thumbnailer import ImageThumbnailer
from .local_file_storage_repository import LocalFileStorageRepository
from .redis_file_entry_repository import RedisFileEntryRepository
from .redis_repository import RedisConnectionManager, RedisRepository
from .redis_session_store import RedisSessionStore
from .redis_user_repository import RedisUserRepository

__all__ = [
    "BcryptPasswordHasher",
    "CeleryJobQueue",
    "ImageThumbnailer",
    "LocalFileStorageRepository",
    "RedisFileEntryRepository",
    "RedisConnectionManager",
    "RedisRepository",
    "RedisSessionStore",
    "RedisUserRepository",
]
