"""Shared pytest fixtures: settings, in-memory store and HTTP client."""

import pytest
from fastapi.testclient import TestClient

from api.src.config import Settings
from api.src.main import create_app
from api.src.repositories.document_store import DocumentStore
from tests.doubles import InMemoryMongoClient

DATABASE_NAME = "web420DB"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="development",
        log_format="text",
        log_level="WARNING",
        mongodb_database=DATABASE_NAME,
        password_bcrypt_rounds=4,
    )


@pytest.fixture
def mongo_client() -> InMemoryMongoClient:
    return InMemoryMongoClient()


@pytest.fixture
def database(mongo_client):
    return mongo_client[DATABASE_NAME]


@pytest.fixture
def document_store(settings, mongo_client) -> DocumentStore:
    return DocumentStore(
        settings.mongodb_url,
        settings.mongodb_database,
        client=mongo_client
    )


@pytest.fixture
def app(settings, document_store):
    return create_app(settings=settings, document_store=document_store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
