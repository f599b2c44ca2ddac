"""
Files Manager

Multi-user file storage backend: token sessions, folder hierarchy,
publishing and asynchronous image thumbnailing.
"""

__version__ = "1.0.0"
