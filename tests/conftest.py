"""Shared fixtures: a store on a temp file and an API client bound to it."""

import pytest
from httpx import ASGITransport, AsyncClient

from tierboard.main import app
from tierboard.stores.ratings_file import TallyFileStore, close_store, init_store


@pytest.fixture
def ratings_path(tmp_path):
    return tmp_path / "ratings.json"


@pytest.fixture
def store(ratings_path) -> TallyFileStore:
    """Initialized store; also installed as the app's store."""
    store = init_store(ratings_path)
    yield store
    close_store()


@pytest.fixture
async def client(store: TallyFileStore):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
