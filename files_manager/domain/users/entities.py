"""
User Entities

Domain entity for registered accounts.
"""

import uuid
from dataclasses import dataclass


@dataclass
class User:
    """
    Registered account.

    The password digest never leaves the domain: public_dict() is the only
    representation handed to clients.
    """
    user_id: str
    email: str
    password_digest: str

    @classmethod
    def create(cls, email: str, password_digest: str) -> 'User':
        """
        Factory method to create a new user with a fresh identifier.

        Args:
            email: Unique email address
            password_digest: Output of the password hasher

        Returns:
            New User instance
        """
        return cls(user_id=uuid.uuid4().hex, email=email, password_digest=password_digest)

    def public_dict(self) -> dict:
        """Client-facing representation (id and email only)."""
        return {"id": self.user_id, "email": self.email}

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "password_digest": self.password_digest,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'User':
        """Create User from dictionary."""
        return cls(
            user_id=data["user_id"],
            email=data["email"],
            password_digest=data["password_digest"],
        )
