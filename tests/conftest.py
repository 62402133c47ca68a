"""
Shared fixtures.

The store is an in-memory mongomock collection; no test talks to a
real MongoDB or a real network.
"""

import mongomock
import pytest

from finance_portal.api import create_app
from finance_portal.config import ApiSettings, get_settings
from finance_portal.services.storage import MongoTransactionStorage


FRONTEND_URL = "http://localhost:8501"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test clean."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def collection():
    return mongomock.MongoClient()["financeportal"]["transactions"]


@pytest.fixture
def storage(collection):
    return MongoTransactionStorage(collection)


@pytest.fixture
def api_settings():
    return ApiSettings(frontend_url=FRONTEND_URL)


@pytest.fixture
def app(storage, api_settings):
    app = create_app(storage=storage, api_settings=api_settings)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def client_payment():
    """The example entry used throughout the tests."""
    return {
        "description": "Client Payment",
        "amount": "2500.00",
        "type": "INCOME",
        "taxCategory": "NONE",
        "date": "2026-02-08",
    }
