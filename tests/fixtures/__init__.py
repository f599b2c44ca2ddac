"""
Test fixtures package.

In-memory collaborators and request helpers for the test suite.
"""

from .helpers import b64, basic_header
from .mock_repositories import (
    MockFileEntryRepository,
    MockSessionStore,
    MockUserRepository,
    RecordingJobQueue,
)

__all__ = [
    "b64",
    "basic_header",
    "MockFileEntryRepository",
    "MockSessionStore",
    "MockUserRepository",
    "RecordingJobQueue",
]
