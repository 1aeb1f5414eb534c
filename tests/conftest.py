"""Shared fixtures: an in-process MongoDB (mongomock) wired to the data layer."""
import mongomock
import pytest

from mflix.core.config import Settings
from mflix.main import lifespan
from mflix.models.user import User

PASSWORD = "correct-horse-battery"


@pytest.fixture
def settings():
    return Settings(bcrypt_rounds=4, top_commenters_limit=20, operation_timeout_seconds=5.0)


@pytest.fixture
def client():
    return mongomock.MongoClient()


@pytest.fixture
def db(client, settings):
    return client[settings.database_name]


@pytest.fixture
def layer(settings, client):
    with lifespan(settings, client=client) as data_layer:
        yield data_layer


@pytest.fixture
def movie_id(db):
    return str(db.movies.insert_one({"title": "The Great Train Robbery", "year": 1903}).inserted_id)


@pytest.fixture
def alice(layer) -> User:
    return layer.auth.register("Alice", "alice@example.com", PASSWORD).user


@pytest.fixture
def bob(layer) -> User:
    return layer.auth.register("Bob", "bob@example.com", PASSWORD).user
