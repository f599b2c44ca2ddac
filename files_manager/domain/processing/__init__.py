"""
Processing Domain

Message shapes, the one-way queue boundary to the external worker, and
the worker's image variant port.
"""

from .jobs import JobQueue, ProcessingJob, Thumbnailer, WelcomeJob

__all__ = [
    'JobQueue',
    'ProcessingJob',
    'Thumbnailer',
    'WelcomeJob',
]
