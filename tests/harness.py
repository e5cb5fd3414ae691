"""Test harness for unit and integration tests.

Unit tests run entirely against in-memory persistence. Integration tests
need a PostgreSQL database reachable through DATABASE__URL.
"""

import pytest_asyncio

from udiddit.persistence.repository.inmemory import InMemoryLegacySource
from udiddit.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory repositories, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_rename(unit_env):
            service = await unit_env.get(UserService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def seed_hi_post(source: InMemoryLegacySource, **overrides) -> None:
    """Seed the canonical legacy post used across migration tests.

    Defaults to a text post by alice under "news"; any field can be
    overridden.
    """
    fields = dict(
        id=1,
        title="Hi",
        username="alice",
        topic="news",
        url=None,
        text_content="hello world",
        upvotes=None,
        downvotes=None,
    )
    fields.update(overrides)
    source.add_post(**fields)
