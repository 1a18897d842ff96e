"""
Pytest configuration and shared fixtures for the Recipe Store API tests.

Every test gets its own application (and therefore its own recipe
store), so tests can create and delete recipes freely.
"""

import pytest
from fastapi.testclient import TestClient

from recipe_store_api.app.core.config import Settings
from recipe_store_api.app.main import create_app
from recipe_store_api.app.services.recipe_service import RecipeStore


@pytest.fixture
def settings():
    """Default settings, independent of the surrounding environment."""
    return Settings(api_prefix="", seed_recipes=True, log_file="")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient bound to a freshly seeded application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    return RecipeStore()
