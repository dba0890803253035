"""Pytest shared fixtures: app wired to in-memory Firebase fakes."""
import pytest
from fastapi.testclient import TestClient

from fakes import ADMIN_TOKEN, STAFF_TOKEN, InMemoryDocumentStore, InMemoryIdentityProvider
from nightlife.app.config import Settings, get_document_store, get_identity_provider
from nightlife.app.main import create_app
from nightlife.app.repositories import admins


@pytest.fixture
def identity():
    return InMemoryIdentityProvider()


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(identity, store, settings):
    app = create_app(settings)
    app.dependency_overrides[get_identity_provider] = lambda: identity
    app.dependency_overrides[get_document_store] = lambda: store
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_uid(identity, store):
    uid = identity.add_account("boss@club.test", "Boss", token=ADMIN_TOKEN)
    admins.grant(store, uid)
    store.writes.clear()
    return uid


@pytest.fixture
def staff_uid(identity):
    return identity.add_account("door@club.test", "Door", token=STAFF_TOKEN)
