"""
Shared pytest fixtures and configuration for the files manager test suite.

This module provides:
- Hypothesis configuration for property-based testing
- In-memory repositories and fully wired services
- Automatic markers based on test location
"""

import pytest
from hypothesis import HealthCheck, Phase, settings

from files_manager.application import (
    AuthService,
    FileService,
    IdentityResolver,
    StatsService,
    UserService,
)
from tests.fixtures.mock_repositories import (
    FakeClock,
    InMemoryContentStore,
    InMemoryFileRepository,
    InMemorySessionStore,
    InMemoryUserRepository,
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


# =============================================================================
# Repository Fixtures
# =============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session_store(clock) -> InMemorySessionStore:
    return InMemorySessionStore(clock=clock)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def file_repository() -> InMemoryFileRepository:
    return InMemoryFileRepository()


@pytest.fixture
def content_store() -> InMemoryContentStore:
    return InMemoryContentStore()


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def identity_resolver(session_store, user_repository) -> IdentityResolver:
    return IdentityResolver(session_store, user_repository)


@pytest.fixture
def auth_service(session_store, user_repository) -> AuthService:
    return AuthService(session_store, user_repository)


@pytest.fixture
def user_service(user_repository, identity_resolver) -> UserService:
    return UserService(user_repository, identity_resolver)


@pytest.fixture
def file_service(identity_resolver, file_repository, content_store) -> FileService:
    return FileService(identity_resolver, file_repository, content_store)


@pytest.fixture
def stats_service(user_repository, file_repository) -> StatsService:
    return StatsService(user_repository, file_repository, lambda: True)


@pytest.fixture
def alice(user_repository):
    return user_repository.add("alice@example.com", "alice-pw")


@pytest.fixture
def bob(user_repository):
    return user_repository.add("bob@example.com", "bob-pw")


@pytest.fixture
def alice_token(auth_service, alice) -> str:
    return auth_service.sign_in("alice@example.com", "alice-pw")


@pytest.fixture
def bob_token(auth_service, bob) -> str:
    return auth_service.sign_in("bob@example.com", "bob-pw")


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require a running Redis)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    - tests/property/* -> @pytest.mark.property
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/property/" in test_path or "\\property\\" in test_path:
            item.add_marker(pytest.mark.property)
