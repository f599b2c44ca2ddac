"""
User Application Service

Coordinates registration and current-user lookup.
"""

import logging
from typing import Any, Dict, Optional

from ..domain.auth import AuthGateway, PasswordHasher
from ..domain.errors import ConflictError, ValidationError
from ..domain.processing import JobQueue, WelcomeJob
from ..domain.users import User, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for account operations.

    Returns JSON-ready dictionaries; raises domain errors.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        auth_gateway: AuthGateway,
        job_queue: JobQueue,
    ):
        self.user_repo = user_repository
        self.hasher = password_hasher
        self.auth = auth_gateway
        self.job_queue = job_queue

    def register(self, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        """
        Create an account.

        Returns:
            {"id", "email"} of the new user

        Raises:
            ValidationError: "Missing email" / "Missing password"
            ConflictError: "Already exist"
            StorageError: If the user store is unavailable
        """
        if not email or not isinstance(email, str):
            raise ValidationError("Missing email")
        if not password or not isinstance(password, str):
            raise ValidationError("Missing password")

        if self.user_repo.get_by_email(email) is not None:
            raise ConflictError("Already exist")

        user = User.create(email, self.hasher.hash(password))
        if not self.user_repo.add(user):
            # Lost a race for the same email
            raise ConflictError("Already exist")

        logger.info(f"Registered user {user.user_id}")

        try:
            self.job_queue.enqueue_welcome(WelcomeJob(user.user_id))
        except Exception as e:
            logger.error(f"Failed to enqueue welcome job for user {user.user_id}: {e}")

        return user.public_dict()

    def get_me(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Current user behind a session token.

        Raises:
            UnauthorizedError: If the token does not resolve
        """
        return self.auth.resolve_identity(token).public_dict()
