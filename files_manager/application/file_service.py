"""
File Application Service

Resolves the caller's identity and delegates to the catalog. Every
operation except read_content requires a live session.
"""

import logging
import mimetypes
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..domain.auth import AuthGateway
from ..domain.catalog import ROOT_PARENT, FileCatalog

logger = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"


@dataclass(frozen=True)
class ContentResponse:
    """Everything the transport needs to stream stored content."""
    path: str
    mimetype: str


class FileService:
    """Application service for file and folder operations."""

    def __init__(self, auth_gateway: AuthGateway, file_catalog: FileCatalog):
        self.auth = auth_gateway
        self.catalog = file_catalog

    def create(self, token: Optional[str], payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an entry from a request payload.

        Payload keys: name, type, data, isPublic, parentId.
        """
        owner = self.auth.resolve_identity(token)
        entry = self.catalog.create(
            owner,
            name=payload.get("name"),
            kind=payload.get("type"),
            is_public=payload.get("isPublic", False),
            parent_id=payload.get("parentId", ROOT_PARENT),
            data=payload.get("data"),
        )
        return entry.public_dict()

    def get(self, token: Optional[str], file_id: str) -> Dict[str, Any]:
        owner = self.auth.resolve_identity(token)
        return self.catalog.get(owner, file_id).public_dict()

    def list(
        self, token: Optional[str], parent_id: Any = None, page: Any = 0
    ) -> List[Dict[str, Any]]:
        owner = self.auth.resolve_identity(token)
        return [entry.public_dict() for entry in self.catalog.list(owner, parent_id, page)]

    def publish(self, token: Optional[str], file_id: str) -> Dict[str, Any]:
        owner = self.auth.resolve_identity(token)
        return self.catalog.set_visibility(owner, file_id, True).public_dict()

    def unpublish(self, token: Optional[str], file_id: str) -> Dict[str, Any]:
        owner = self.auth.resolve_identity(token)
        return self.catalog.set_visibility(owner, file_id, False).public_dict()

    def read_content(
        self, token: Optional[str], file_id: str, size: Any = 0
    ) -> ContentResponse:
        """
        Locate content for streaming.

        The token is optional here; a bad or foreign token is treated the
        same as no token. Mutates nothing.
        """
        requester = self.auth.identify(token)
        handle = self.catalog.read_content(file_id, requester, size)
        mimetype, _ = mimetypes.guess_type(handle.name)
        return ContentResponse(path=handle.path, mimetype=mimetype or DEFAULT_MIMETYPE)
