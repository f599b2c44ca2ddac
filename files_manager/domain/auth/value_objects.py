"""
Auth Value Objects

Immutable value objects for credentials and session tokens.
"""

import base64
import binascii
import secrets
from dataclasses import dataclass
from typing import Optional


BASIC_SCHEME = "Basic "


@dataclass(frozen=True)
class BasicCredentials:
    """Email/password pair carried by a Basic authorization header."""
    email: str
    password: str

    @classmethod
    def from_header(cls, header: Optional[str]) -> Optional['BasicCredentials']:
        """
        Decode an `Authorization: Basic <base64(email:password)>` header.

        The password may itself contain colons; only the first one splits.

        Returns:
            BasicCredentials, or None for any malformed input
        """
        if not header or not header.startswith(BASIC_SCHEME):
            return None

        encoded = header[len(BASIC_SCHEME):].strip()
        try:
            decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError, ValueError):
            return None

        email, separator, password = decoded.partition(":")
        if not separator or not email or not password:
            return None

        return cls(email=email, password=password)


@dataclass(frozen=True)
class SessionToken:
    """Opaque bearer credential minted on login."""
    value: str

    @classmethod
    def generate(cls, length: int = 32) -> 'SessionToken':
        """
        Generate a cryptographically secure random token.

        Args:
            length: Token length in bytes (default: 32)
        """
        return cls(secrets.token_urlsafe(length))

    def masked(self) -> str:
        """Token prefix safe for log lines."""
        return f"{self.value[:8]}..."

    def __str__(self) -> str:
        return self.value
