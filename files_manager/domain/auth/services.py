"""
Auth Services

Domain services for credential verification and session-token
authentication.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..errors import StorageError, UnauthorizedError
from ..users import User, UserRepository
from .repositories import SessionStore
from .value_objects import BasicCredentials, SessionToken

logger = logging.getLogger(__name__)

# 24 hours
DEFAULT_SESSION_TTL = 86400


class PasswordHasher(ABC):
    """Computationally costed one-way password digest."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Digest a plaintext password for storage."""
        pass

    @abstractmethod
    def verify(self, password: str, digest: str) -> bool:
        """Check a plaintext password against a stored digest."""
        pass


class CredentialVerifier:
    """
    Validates email/password pairs against stored digests.

    Never distinguishes an unknown email from a wrong password.
    """

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repo = user_repository
        self.hasher = password_hasher

    def verify(self, email: str, password: str) -> Optional[User]:
        """
        Look up the user by exact email and compare password digests.

        Args:
            email: Email address as typed
            password: Plaintext password

        Returns:
            The matched User, or None for any mismatch
        """
        user = self.user_repo.get_by_email(email)
        if user is None:
            return None

        if not self.hasher.verify(password, user.password_digest):
            return None

        return user


class AuthGateway:
    """
    Issues and revokes session tokens and resolves tokens to users.

    Minting a token in login() is the only place new session state is
    created; every other session mutation is a deletion.
    """

    def __init__(
        self,
        session_store: SessionStore,
        credential_verifier: CredentialVerifier,
        user_repository: UserRepository,
        session_ttl: int = DEFAULT_SESSION_TTL,
    ):
        """
        Initialize AuthGateway with its collaborators.

        Args:
            session_store: Expiring token store
            credential_verifier: Email/password checker
            user_repository: Used to confirm a session's user still exists
            session_ttl: Session lifetime in seconds
        """
        self.sessions = session_store
        self.verifier = credential_verifier
        self.user_repo = user_repository
        self.session_ttl = session_ttl

    def login(self, authorization_header: Optional[str]) -> str:
        """
        Sign in with a Basic authorization header.

        Args:
            authorization_header: Raw `Authorization` header value

        Returns:
            Newly minted token

        Raises:
            UnauthorizedError: For malformed input or bad credentials
            StorageError: If the session could not be stored
        """
        credentials = BasicCredentials.from_header(authorization_header)
        if credentials is None:
            raise UnauthorizedError()

        user = self.verifier.verify(credentials.email, credentials.password)
        if user is None:
            raise UnauthorizedError()

        token = SessionToken.generate()
        if not self.sessions.put(token.value, user.user_id, self.session_ttl):
            raise StorageError("Could not store session")

        logger.info(f"Issued session {token.masked()} for user {user.user_id}")
        return token.value

    def logout(self, token: Optional[str]) -> None:
        """
        Revoke a live session.

        Raises:
            UnauthorizedError: If the token does not currently resolve
        """
        if not token or self.sessions.get(token) is None:
            raise UnauthorizedError()

        self.sessions.delete(token)
        logger.info(f"Revoked session {SessionToken(token).masked()}")

    def resolve_identity(self, token: Optional[str]) -> User:
        """
        Resolve the token header of a protected operation to its user.

        Raises:
            UnauthorizedError: If the token is missing, unknown, expired,
                or its user no longer exists
        """
        user = self.identify(token)
        if user is None:
            raise UnauthorizedError()
        return user

    def identify(self, token: Optional[str]) -> Optional[User]:
        """Non-raising variant of resolve_identity()."""
        if not token:
            return None

        user_id = self.sessions.get(token)
        if user_id is None:
            return None

        return self.user_repo.get_by_id(user_id)
