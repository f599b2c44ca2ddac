"""
Auth Domain

Session store contract, credential verification and the auth gateway.
"""

from .repositories import SessionStore
from .services import (
    DEFAULT_SESSION_TTL,
    AuthGateway,
    CredentialVerifier,
    PasswordHasher,
)
from .value_objects import BasicCredentials, SessionToken

__all__ = [
    'SessionStore',
    'AuthGateway',
    'CredentialVerifier',
    'PasswordHasher',
    'BasicCredentials',
    'SessionToken',
    'DEFAULT_SESSION_TTL',
]
