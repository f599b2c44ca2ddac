"""
Shared pytest fixtures and configuration for the files manager test suite.

This module provides:
- Hypothesis configuration for property-based testing
- In-memory collaborators wired into the real domain/application services
- Pytest markers derived from test location
"""

import pytest
from hypothesis import HealthCheck, Phase, settings

from files_manager.application.dependency_container import DependencyContainer
from files_manager.application.file_service import FileService
from files_manager.application.processing_service import ProcessingService
from files_manager.application.status_service import StatusService
from files_manager.application.user_service import UserService
from files_manager.domain.auth import AuthGateway, CredentialVerifier
from files_manager.domain.catalog import FileCatalog
from files_manager.domain.file_storage import UploadPipeline
from files_manager.domain.users import User
from files_manager.infrastructure.bcrypt_password_hasher import BcryptPasswordHasher
from files_manager.infrastructure.image_thumbnailer import ImageThumbnailer
from files_manager.infrastructure.local_file_storage_repository import (
    LocalFileStorageRepository,
)
from tests.fixtures import (
    MockFileEntryRepository,
    MockSessionStore,
    MockUserRepository,
    RecordingJobQueue,
)

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class FakeClock:
    """Monotonic clock under test control."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_store(clock):
    return MockSessionStore(clock=clock)


@pytest.fixture
def user_repository():
    return MockUserRepository()


@pytest.fixture
def entry_repository():
    return MockFileEntryRepository()


@pytest.fixture
def job_queue():
    return RecordingJobQueue()


@pytest.fixture
def storage_repository(tmp_path):
    return LocalFileStorageRepository(str(tmp_path / "files_manager"))


@pytest.fixture
def password_hasher():
    """bcrypt with the minimum cost factor to keep the suite fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def auth_gateway(session_store, user_repository, password_hasher):
    return AuthGateway(
        session_store,
        CredentialVerifier(user_repository, password_hasher),
        user_repository,
    )


@pytest.fixture
def upload_pipeline(storage_repository, job_queue):
    return UploadPipeline(storage_repository, job_queue)


@pytest.fixture
def file_catalog(entry_repository, upload_pipeline, storage_repository):
    return FileCatalog(entry_repository, upload_pipeline, storage_repository)


@pytest.fixture
def user_factory(user_repository, password_hasher):
    """Register users directly in the repository."""

    def make_user(email: str = "bob@dylan.com", password: str = "toto1234!") -> User:
        user = User.create(email, password_hasher.hash(password))
        user_repository.add(user)
        return user

    return make_user


@pytest.fixture
def user_service(user_repository, password_hasher, auth_gateway, job_queue):
    return UserService(user_repository, password_hasher, auth_gateway, job_queue)


@pytest.fixture
def file_service(auth_gateway, file_catalog):
    return FileService(auth_gateway, file_catalog)


@pytest.fixture
def status_service(session_store, user_repository, entry_repository):
    return StatusService(session_store, user_repository, entry_repository)


@pytest.fixture
def processing_service(entry_repository, user_repository):
    return ProcessingService(entry_repository, user_repository, ImageThumbnailer())


@pytest.fixture
def container(
    auth_gateway, user_service, file_service, status_service, processing_service
):
    """DependencyContainer wired to the in-memory collaborators."""
    container = DependencyContainer()
    container.register_singleton(AuthGateway, auth_gateway)
    container.register_singleton(UserService, user_service)
    container.register_singleton(FileService, file_service)
    container.register_singleton(StatusService, status_service)
    container.register_singleton(ProcessingService, processing_service)
    return container


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require external services)"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
