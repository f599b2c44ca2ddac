"""
Status Application Service

Liveness and usage counters for the status/stats endpoints.
"""

from typing import Dict

from ..domain.auth import SessionStore
from ..domain.catalog import FileEntryRepository
from ..domain.errors import StorageError
from ..domain.users import UserRepository


class StatusService:
    """Application service for health and statistics."""

    def __init__(
        self,
        session_store: SessionStore,
        user_repository: UserRepository,
        entry_repository: FileEntryRepository,
    ):
        self.sessions = session_store
        self.user_repo = user_repository
        self.entries = entry_repository

    def get_status(self) -> Dict[str, bool]:
        """Liveness of both stores; never raises."""
        return {
            "sessionStoreAlive": self.sessions.is_alive(),
            "catalogStoreAlive": self.entries.is_alive(),
        }

    def get_stats(self) -> Dict[str, int]:
        """
        Current number of users and entries.

        Raises:
            StorageError: If either count cannot be read
        """
        try:
            return {"users": self.user_repo.count(), "files": self.entries.count()}
        except Exception as e:
            raise StorageError("Failed to retrieve stats", original_error=e)
