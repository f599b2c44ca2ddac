"""
File Storage Domain

Durable blob storage contract and the upload pipeline.
"""

from .services import UploadPipeline
from .storage_repository import IFileStorageRepository

__all__ = [
    'UploadPipeline',
    'IFileStorageRepository',
]
