import pytest
from fastapi.testclient import TestClient

from catalog.core.db import Store
from catalog.main import create_app


@pytest.fixture
def store():
    store = Store("sqlite://").connect()
    yield store
    store.close()


@pytest.fixture
def client():
    with TestClient(create_app("sqlite://")) as c:
        yield c


@pytest.fixture
def app_store(client) -> Store:
    return client.app.state.store
