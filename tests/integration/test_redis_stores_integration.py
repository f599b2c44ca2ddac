"""
Integration tests for the Redis-backed stores against a live Redis.
"""

import pytest

from files_manager.domain.catalog import ROOT_PARENT, FileEntry, FileKind
from files_manager.domain.users import User
from files_manager.infrastructure import (
    RedisFileEntryRepository,
    RedisSessionStore,
    RedisUserRepository,
)
from files_manager.infrastructure.redis_repository import RedisRepository


class TestRedisSessionStoreIntegration:
    """Test session keys and TTLs."""

    def test_put_get_delete(self, redis_client):
        store = RedisSessionStore(RedisRepository(redis_client))

        assert store.put("tok", "u1", 86400) is True
        assert store.get("tok") == "u1"
        assert 0 < redis_client.ttl("auth_tok") <= 86400

        store.delete("tok")
        assert store.get("tok") is None

    def test_delete_missing_session(self, redis_client):
        RedisSessionStore(RedisRepository(redis_client)).delete("missing")

    def test_is_alive(self, redis_client):
        assert RedisSessionStore(RedisRepository(redis_client)).is_alive() is True


class TestRedisUserRepositoryIntegration:
    """Test users and the email index."""

    def test_add_and_lookup(self, redis_repo):
        repo = RedisUserRepository(redis_repo)
        user = User.create("bob@dylan.com", "digest")

        assert repo.add(user) is True
        assert repo.get_by_id(user.user_id) == user
        assert repo.get_by_email("bob@dylan.com") == user
        assert repo.count() == 1

    def test_email_is_unique(self, redis_repo):
        repo = RedisUserRepository(redis_repo)

        assert repo.add(User.create("bob@dylan.com", "a")) is True
        assert repo.add(User.create("bob@dylan.com", "b")) is False
        assert repo.count() == 1


class TestRedisFileEntryRepositoryIntegration:
    """Test entries, listings and visibility updates."""

    def test_listing_is_per_owner_and_parent_in_insertion_order(self, redis_repo):
        repo = RedisFileEntryRepository(redis_repo)
        folder = FileEntry.create("u1", "dir", FileKind.FOLDER)
        repo.add(folder)
        names = [f"f{i}" for i in range(25)]
        for name in names:
            repo.add(FileEntry.create("u1", name, FileKind.FOLDER, parent_id=folder.file_id))
        repo.add(FileEntry.create("u2", "other", FileKind.FOLDER, parent_id=folder.file_id))

        first = repo.list_children("u1", folder.file_id, 0, 20)
        second = repo.list_children("u1", folder.file_id, 20, 20)

        assert [e.name for e in first] == names[:20]
        assert [e.name for e in second] == names[20:]
        assert [e.name for e in repo.list_children("u1", ROOT_PARENT, 0, 20)] == ["dir"]
        assert [e.name for e in repo.list_children("u2", folder.file_id, 0, 20)] == ["other"]
        assert repo.count() == 27

    def test_set_public_updates_only_visibility(self, redis_repo):
        repo = RedisFileEntryRepository(redis_repo)
        entry = FileEntry.create("u1", "a.txt", FileKind.FILE, local_path="/tmp/abc")
        repo.add(entry)

        updated = repo.set_public(entry.file_id, True)

        assert updated == entry.with_visibility(True)
        assert repo.get(entry.file_id) == updated
        assert repo.set_public(entry.file_id, True) == updated

    def test_set_public_missing_entry(self, redis_repo):
        assert RedisFileEntryRepository(redis_repo).set_public("missing", True) is None

    @pytest.mark.parametrize("count", [0, 3])
    def test_count(self, redis_repo, count):
        repo = RedisFileEntryRepository(redis_repo)
        for i in range(count):
            repo.add(FileEntry.create("u1", f"f{i}", FileKind.FOLDER))

        assert repo.count() == count
