"""
Users Domain

Registered accounts and their persistence contract.
"""

from .entities import User
from .repositories import UserRepository

__all__ = [
    'User',
    'UserRepository',
]
