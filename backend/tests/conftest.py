"""
Movies API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, fresh for each test):
    ├── movie_store: MovieStore holding a copy of the built-in seed list
    ├── test_app: FastAPI app created around movie_store
    ├── test_client: HTTPX AsyncClient talking to test_app in-process
    └── new_movie: A well-formed POST /movies body
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("SEED_FILE", None)

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from movies_api.main import create_app
from movies_api.services.movie_store import MovieStore


@pytest.fixture
def movie_store():
    """A fresh store per test, so deletes and creates never leak between tests."""
    return MovieStore()


@pytest.fixture
def test_app(movie_store):
    return create_app(store=movie_store)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed directly to the app through ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/movies")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def new_movie():
    """A movie that is not in the seed list."""
    return {
        "id": 13,
        "imdb_id": "tt9603208",
        "title": "Mission: Impossible - The Final Reckoning",
        "year": 2025,
        "runtime": "2:52:54",
        "rating": "PG-13",
        "poster": "https://image.tmdb.org/t/p/original/z53D72EAOxGRqdr7KXXWp9dJiDe.jpg",
        "genres": ["Action", "Adventure", "Thriller"],
    }
