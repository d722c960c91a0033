"""
Shared fixtures for the Foodie Find test suite.

HTTP is never touched: the API client gets a Mock standing in for requests.Session,
and responses are real requests.Response objects built by make_response().
"""

import json
from typing import Any, Optional
from unittest.mock import Mock

import pytest
import requests

from recipe_finder.client import SpoonacularClient
from recipe_finder.coordinator import AppCoordinator
from recipe_finder.credentials import API_KEY_STORAGE_KEY, CredentialStore
from recipe_finder.favorites import FavoritesStore
from recipe_finder.storage import MemoryStore

TEST_BASE_URL = "https://api.test"
TEST_API_KEY = "test-key-123"


def make_response(status_code: int = 200, json_body: Any = None, text: Optional[str] = None) -> requests.Response:
    """Build a requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        body = json.dumps(json_body)
    else:
        body = text or ""
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.url = TEST_BASE_URL
    return response


def recipe_payload(recipe_id: int, title: str = None, **extra) -> dict:
    """Minimal recipe record in the API's camelCase shape."""
    payload = {"id": recipe_id, "title": title or f"Recipe {recipe_id}", "image": f"https://img.test/{recipe_id}.jpg"}
    payload.update(extra)
    return payload


def search_payload(*recipe_ids: int, total: Optional[int] = None) -> dict:
    results = [recipe_payload(recipe_id) for recipe_id in recipe_ids]
    return {"results": results, "totalResults": total if total is not None else len(results), "offset": 0, "number": 12}


@pytest.fixture
def storage():
    return MemoryStore()


@pytest.fixture
def keyed_storage():
    return MemoryStore({API_KEY_STORAGE_KEY: TEST_API_KEY})


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(json_body=search_payload())
    return session


@pytest.fixture
def client(session):
    return SpoonacularClient(base_url=TEST_BASE_URL, timeout=5, session=session)


@pytest.fixture
def coordinator(keyed_storage, client):
    return AppCoordinator(
        credentials=CredentialStore(keyed_storage),
        favorites=FavoritesStore(keyed_storage),
        client=client,
        page_size=12,
    )


@pytest.fixture
def anonymous_coordinator(storage, client):
    return AppCoordinator(
        credentials=CredentialStore(storage),
        favorites=FavoritesStore(storage),
        client=client,
        page_size=12,
    )
