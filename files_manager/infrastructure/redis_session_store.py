"""
Redis Session Store Implementation

Concrete Redis-based implementation of the SessionStore interface.
Sessions are plain `auth_<token>` keys holding the user id, expired by
Redis TTL.
"""

from typing import Optional

from ..domain.auth import SessionStore
from .redis_repository import RedisRepository


class RedisSessionStore(SessionStore):
    """
    Redis-based implementation of SessionStore.

    Inherits the fail-soft behaviour of RedisRepository: an unavailable
    Redis reads as a missing session.
    """

    def __init__(self, redis_repository: RedisRepository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository bound to the session database
        """
        self.redis_repo = redis_repository
        self.key_prefix = "auth"

    def _key(self, token: str) -> str:
        return f"{self.key_prefix}_{token}"

    def put(self, token: str, user_id: str, ttl_seconds: int) -> bool:
        """Store token -> user id with a fresh TTL."""
        return self.redis_repo.set_value(self._key(token), str(user_id), ttl=ttl_seconds)

    def get(self, token: str) -> Optional[str]:
        """Return the user id for token, None if missing, expired or unreachable."""
        if not token:
            return None
        return self.redis_repo.get_value(self._key(token))

    def delete(self, token: str) -> None:
        """Remove the session; deleting a missing session is a no-op."""
        self.redis_repo.delete(self._key(token))

    def is_alive(self) -> bool:
        return self.redis_repo.ping()
