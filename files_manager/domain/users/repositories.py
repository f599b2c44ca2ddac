"""
User Repositories

Repository interface for account persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .entities import User


class UserRepository(ABC):
    """Abstract repository interface for user persistence."""

    @abstractmethod
    def add(self, user: User) -> bool:
        """
        Persist a new user, claiming its email atomically.

        Args:
            user: User to save

        Returns:
            True if saved, False if the email is already taken

        Raises:
            StorageError: If the backing store rejects the write
        """
        pass

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve a user by identifier, None if absent."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by exact email match, None if absent."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of registered users."""
        pass

    @abstractmethod
    def is_alive(self) -> bool:
        """Whether the backing connection is currently usable."""
        pass
