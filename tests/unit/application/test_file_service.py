"""
Unit tests for FileService.
"""

import pytest

from files_manager.domain.errors import NotFoundError, UnauthorizedError
from tests.fixtures import b64, basic_header


@pytest.fixture
def token(user_factory, auth_gateway):
    user_factory("bob@dylan.com", "toto1234!")
    return auth_gateway.login(basic_header("bob@dylan.com", "toto1234!"))


@pytest.fixture
def other_token(user_factory, auth_gateway):
    user_factory("alice@dylan.com", "secret")
    return auth_gateway.login(basic_header("alice@dylan.com", "secret"))


class TestFileService:
    """Test payload mapping and identity resolution."""

    def test_create_maps_payload(self, file_service, token):
        folder = file_service.create(token, {"name": "images", "type": "folder"})
        child = file_service.create(token, {
            "name": "a.txt",
            "type": "file",
            "isPublic": True,
            "parentId": folder["id"],
            "data": b64(b"hello"),
        })

        assert folder["parentId"] == 0
        assert folder["isPublic"] is False
        assert child["parentId"] == folder["id"]
        assert child["isPublic"] is True
        assert child["type"] == "file"

    def test_parent_id_zero_is_root(self, file_service, token):
        entry = file_service.create(token, {"name": "x", "type": "folder", "parentId": 0})
        assert entry["parentId"] == 0

    @pytest.mark.parametrize("operation", ["create", "get", "list", "publish", "unpublish"])
    def test_operations_require_a_session(self, file_service, operation):
        calls = {
            "create": lambda: file_service.create("bogus", {"name": "x", "type": "folder"}),
            "get": lambda: file_service.get("bogus", "id"),
            "list": lambda: file_service.list("bogus"),
            "publish": lambda: file_service.publish("bogus", "id"),
            "unpublish": lambda: file_service.unpublish("bogus", "id"),
        }
        with pytest.raises(UnauthorizedError):
            calls[operation]()

    def test_list_with_string_arguments(self, file_service, token):
        folder = file_service.create(token, {"name": "dir", "type": "folder"})
        file_service.create(token, {"name": "x", "type": "folder", "parentId": folder["id"]})

        assert [e["name"] for e in file_service.list(token, "0", "0")] == ["dir"]
        assert [e["name"] for e in file_service.list(token, folder["id"], "abc")] == ["x"]

    def test_publish_and_unpublish(self, file_service, token):
        entry = file_service.create(token, {"name": "x", "type": "folder"})

        assert file_service.publish(token, entry["id"])["isPublic"] is True
        assert file_service.unpublish(token, entry["id"])["isPublic"] is False

    def test_read_content_guesses_mimetype(self, file_service, token):
        entry = file_service.create(token, {"name": "a.txt", "type": "file", "data": b64(b"hi")})

        content = file_service.read_content(token, entry["id"])

        assert content.mimetype == "text/plain"
        with open(content.path, "rb") as f:
            assert f.read() == b"hi"

    def test_read_content_unknown_extension(self, file_service, token):
        entry = file_service.create(token, {"name": "blob", "type": "file", "data": b64(b"hi")})

        assert file_service.read_content(token, entry["id"]).mimetype == "application/octet-stream"

    def test_read_private_content_with_foreign_or_bad_token(self, file_service, token, other_token):
        entry = file_service.create(token, {"name": "a.txt", "type": "file", "data": b64(b"hi")})

        for requester in (other_token, "bogus", None):
            with pytest.raises(NotFoundError):
                file_service.read_content(requester, entry["id"])

    def test_read_public_content_without_token(self, file_service, token):
        entry = file_service.create(
            token, {"name": "a.txt", "type": "file", "isPublic": True, "data": b64(b"hi")}
        )

        assert file_service.read_content(None, entry["id"]).mimetype == "text/plain"
