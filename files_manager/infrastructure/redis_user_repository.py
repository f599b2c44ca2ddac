"""
Redis User Repository Implementation

Concrete Redis-based implementation of UserRepository.

Keys:
- user:<id>            -> user document (JSON)
- user_email:<email>   -> user id (claimed with SET NX)
- users                -> set of all user ids
"""

import logging
from typing import Optional

from ..domain.errors import StorageError
from ..domain.users import User, UserRepository
from .redis_repository import RedisRepository

logger = logging.getLogger(__name__)


class RedisUserRepository(UserRepository):
    """Redis-based implementation of UserRepository."""

    def __init__(self, redis_repository: RedisRepository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository bound to the catalog database
        """
        self.redis_repo = redis_repository
        self.user_prefix = "user"
        self.email_prefix = "user_email"
        self.index_key = "users"

    def add(self, user: User) -> bool:
        """
        Save a new user.

        The email index key is claimed first, so of two concurrent
        registrations with one email exactly one succeeds.
        """
        email_key = f"{self.email_prefix}:{user.email}"
        claimed = self.redis_repo.set_if_absent(email_key, user.user_id)
        if claimed is None:
            raise StorageError("Could not reach user store")
        if not claimed:
            return False

        if not self.redis_repo.set_json(f"{self.user_prefix}:{user.user_id}", user.to_dict()):
            self.redis_repo.delete(email_key)
            raise StorageError("Could not save user")

        self.redis_repo.add_to_set(self.index_key, user.user_id)
        return True

    def get_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None

        data = self.redis_repo.get_json(f"{self.user_prefix}:{user_id}")
        if data is None:
            return None

        try:
            return User.from_dict(data)
        except (KeyError, TypeError) as e:
            logger.error(f"Error deserializing user {user_id}: {e}")
            return None

    def get_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None

        user_id = self.redis_repo.get_value(f"{self.email_prefix}:{email}")
        if user_id is None:
            return None
        return self.get_by_id(user_id)

    def count(self) -> int:
        return self.redis_repo.set_size(self.index_key)

    def is_alive(self) -> bool:
        return self.redis_repo.ping()
