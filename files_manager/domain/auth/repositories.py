"""
Auth Repositories

Contract of the expiring session store.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SessionStore(ABC):
    """
    Expiring token -> user id mapping.

    Every operation is fail-soft: a backing-store outage reads as "absent"
    and writes/deletes become no-ops reported through the return value.
    """

    @abstractmethod
    def put(self, token: str, user_id: str, ttl_seconds: int) -> bool:
        """
        Store the mapping and reset its expiry clock.

        Returns:
            True if stored, False if the store was unavailable
        """
        pass

    @abstractmethod
    def get(self, token: str) -> Optional[str]:
        """Return the user id bound to token, None if missing or expired."""
        pass

    @abstractmethod
    def delete(self, token: str) -> None:
        """Remove the mapping; no error if already absent."""
        pass

    @abstractmethod
    def is_alive(self) -> bool:
        """Whether the backing connection is currently usable."""
        pass
