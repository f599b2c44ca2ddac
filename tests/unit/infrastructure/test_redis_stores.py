"""
Unit tests for the Redis-backed session store, user repository and file
entry repository, using a mocked RedisRepository.
"""

from unittest.mock import Mock

import pytest

from files_manager.domain.catalog import FileEntry, FileKind
from files_manager.domain.errors import StorageError
from files_manager.domain.users import User
from files_manager.infrastructure import (
    RedisFileEntryRepository,
    RedisSessionStore,
    RedisUserRepository,
)
from files_manager.infrastructure.redis_repository import RedisRepository


@pytest.fixture
def redis_repo():
    return Mock(spec=RedisRepository)


class TestRedisSessionStore:
    """Test auth_<token> keys."""

    def test_put_sets_key_with_ttl(self, redis_repo):
        redis_repo.set_value.return_value = True
        store = RedisSessionStore(redis_repo)

        assert store.put("tok", "user-1", 86400) is True
        redis_repo.set_value.assert_called_once_with("auth_tok", "user-1", ttl=86400)

    def test_get(self, redis_repo):
        redis_repo.get_value.return_value = "user-1"
        store = RedisSessionStore(redis_repo)

        assert store.get("tok") == "user-1"
        redis_repo.get_value.assert_called_once_with("auth_tok")

    def test_get_empty_token_skips_store(self, redis_repo):
        assert RedisSessionStore(redis_repo).get("") is None
        redis_repo.get_value.assert_not_called()

    def test_delete(self, redis_repo):
        RedisSessionStore(redis_repo).delete("tok")
        redis_repo.delete.assert_called_once_with("auth_tok")

    def test_is_alive(self, redis_repo):
        redis_repo.ping.return_value = False
        assert RedisSessionStore(redis_repo).is_alive() is False


class TestRedisUserRepository:
    """Test user persistence and email uniqueness."""

    def test_add_claims_email_then_stores_user(self, redis_repo):
        redis_repo.set_if_absent.return_value = True
        redis_repo.set_json.return_value = True
        user = User("u1", "bob@dylan.com", "digest")

        assert RedisUserRepository(redis_repo).add(user) is True

        redis_repo.set_if_absent.assert_called_once_with("user_email:bob@dylan.com", "u1")
        redis_repo.set_json.assert_called_once_with("user:u1", user.to_dict())
        redis_repo.add_to_set.assert_called_once_with("users", "u1")

    def test_add_taken_email(self, redis_repo):
        redis_repo.set_if_absent.return_value = False

        assert RedisUserRepository(redis_repo).add(User("u1", "bob@dylan.com", "d")) is False
        redis_repo.set_json.assert_not_called()

    def test_add_unavailable_store(self, redis_repo):
        redis_repo.set_if_absent.return_value = None

        with pytest.raises(StorageError):
            RedisUserRepository(redis_repo).add(User("u1", "bob@dylan.com", "d"))

    def test_add_releases_email_when_user_write_fails(self, redis_repo):
        redis_repo.set_if_absent.return_value = True
        redis_repo.set_json.return_value = False

        with pytest.raises(StorageError):
            RedisUserRepository(redis_repo).add(User("u1", "bob@dylan.com", "d"))
        redis_repo.delete.assert_called_once_with("user_email:bob@dylan.com")

    def test_get_by_email(self, redis_repo):
        user = User("u1", "bob@dylan.com", "d")
        redis_repo.get_value.return_value = "u1"
        redis_repo.get_json.return_value = user.to_dict()

        assert RedisUserRepository(redis_repo).get_by_email("bob@dylan.com") == user
        redis_repo.get_json.assert_called_once_with("user:u1")

    def test_get_by_email_unknown(self, redis_repo):
        redis_repo.get_value.return_value = None
        assert RedisUserRepository(redis_repo).get_by_email("x@y.z") is None

    def test_get_by_id_corrupt_document(self, redis_repo):
        redis_repo.get_json.return_value = {"email": "x"}
        assert RedisUserRepository(redis_repo).get_by_id("u1") is None

    def test_count(self, redis_repo):
        redis_repo.set_size.return_value = 4
        assert RedisUserRepository(redis_repo).count() == 4
        redis_repo.set_size.assert_called_once_with("users")


class TestRedisFileEntryRepository:
    """Test entry persistence and listing."""

    def test_add_stores_and_indexes(self, redis_repo):
        redis_repo.set_json.return_value = True
        redis_repo.append_to_list.return_value = True
        entry = FileEntry("f1", "u1", "a", FileKind.FOLDER)

        assert RedisFileEntryRepository(redis_repo).add(entry) is True

        redis_repo.set_json.assert_called_once_with("file:f1", entry.to_dict())
        redis_repo.append_to_list.assert_called_once_with("children:u1:root", "f1")
        redis_repo.add_to_set.assert_called_once_with("files", "f1")

    def test_add_write_failure(self, redis_repo):
        redis_repo.set_json.return_value = False

        assert RedisFileEntryRepository(redis_repo).add(FileEntry("f1", "u1", "a", FileKind.FOLDER)) is False
        redis_repo.append_to_list.assert_not_called()

    def test_add_removes_unindexed_entry(self, redis_repo):
        redis_repo.set_json.return_value = True
        redis_repo.append_to_list.return_value = False

        assert RedisFileEntryRepository(redis_repo).add(FileEntry("f1", "u1", "a", FileKind.FOLDER)) is False
        redis_repo.delete.assert_called_once_with("file:f1")

    def test_list_children(self, redis_repo):
        first = FileEntry("f1", "u1", "a", FileKind.FOLDER, parent_id="p")
        second = FileEntry("f2", "u1", "b", FileKind.FOLDER, parent_id="p")
        redis_repo.get_list_range.return_value = ["f1", "f2"]
        redis_repo.get_many_json.return_value = [first.to_dict(), second.to_dict()]

        entries = RedisFileEntryRepository(redis_repo).list_children("u1", "p", 20, 20)

        assert entries == [first, second]
        redis_repo.get_list_range.assert_called_once_with("children:u1:p", 20, 20)
        redis_repo.get_many_json.assert_called_once_with(["file:f1", "file:f2"])

    def test_list_children_skips_missing_documents(self, redis_repo):
        entry = FileEntry("f1", "u1", "a", FileKind.FOLDER)
        redis_repo.get_list_range.return_value = ["f1", "gone"]
        redis_repo.get_many_json.return_value = [entry.to_dict(), None]

        assert RedisFileEntryRepository(redis_repo).list_children("u1", "root", 0, 20) == [entry]

    def test_set_public(self, redis_repo):
        entry = FileEntry("f1", "u1", "a", FileKind.FOLDER, is_public=True)
        redis_repo.update_json_field.return_value = entry.to_dict()

        assert RedisFileEntryRepository(redis_repo).set_public("f1", True) == entry
        redis_repo.update_json_field.assert_called_once_with("file:f1", "is_public", True)

    def test_set_public_missing(self, redis_repo):
        redis_repo.update_json_field.return_value = None
        assert RedisFileEntryRepository(redis_repo).set_public("f1", True) is None

    def test_get_bad_kind(self, redis_repo):
        document = FileEntry("f1", "u1", "a", FileKind.FOLDER).to_dict()
        document["kind"] = "video"
        redis_repo.get_json.return_value = document

        assert RedisFileEntryRepository(redis_repo).get("f1") is None
