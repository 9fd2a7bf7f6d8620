"""
conftest.py - Shared test fixtures.

Every test gets its own store and its own app, so no state leaks between
tests.
"""

import pytest
from fastapi.testclient import TestClient

from database import MemoryStorage
from main import create_app


@pytest.fixture()
def storage() -> MemoryStorage:
    """Store loaded with the sample records."""
    return MemoryStorage()


@pytest.fixture()
def empty_storage() -> MemoryStorage:
    return MemoryStorage(seed=False)


@pytest.fixture()
def client(storage: MemoryStorage) -> TestClient:
    return TestClient(create_app(storage))


@pytest.fixture()
def town_hall() -> dict:
    return {
        "title": "Town Hall",
        "description": "desc",
        "date": "2025-01-10",
        "time": "10:00",
        "location": "Hall A",
        "category": "Training",
    }
