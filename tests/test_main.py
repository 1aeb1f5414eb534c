"""Tests for wiring the data layer and its storage configuration."""
from unittest.mock import patch

import mongomock
import pytest

from mflix.core.config import Settings
from mflix.db.session import StorageConfig, create_client, operation_timeout
from mflix.main import lifespan


class TestLifespan:
    def test_creates_unique_indexes(self, layer, db):
        users_indexes = db.users.index_information()
        sessions_indexes = db.sessions.index_information()
        assert users_indexes["uq_users_email"]["unique"] is True
        assert sessions_indexes["uq_sessions_user_id"]["unique"] is True

    def test_closes_owned_client(self, settings):
        client = mongomock.MongoClient()
        with patch("mflix.main.create_client", return_value=client) as factory:
            with patch.object(client, "close") as close:
                with lifespan(settings) as data_layer:
                    assert data_layer.auth is not None
                close.assert_called_once()
        factory.assert_called_once_with(settings)

    def test_leaves_supplied_client_open(self, settings):
        client = mongomock.MongoClient()
        with patch.object(client, "close") as close:
            with lifespan(settings, client=client):
                pass
        close.assert_not_called()


class TestStorageConfig:
    def test_defaults(self):
        config = StorageConfig()
        assert config.database_name == "sample_mflix"
        assert config.codec_options.tz_aware is True
        assert config.strong_write.document == {"w": "majority"}
        assert config.strong_read.level == "majority"

    def test_is_immutable(self):
        config = StorageConfig()
        with pytest.raises(AttributeError):
            config.database_name = "other"

    def test_from_settings(self):
        config = StorageConfig.from_settings(Settings(database_name="mflix_test"))
        assert config.database_name == "mflix_test"

    def test_client_options(self):
        settings = Settings(
            mongodb_uri="mongodb://db.invalid:27017",
            server_selection_timeout_ms=1500,
            operation_timeout_seconds=2.5,
        )
        client = create_client(settings)
        try:
            assert client.options.server_selection_timeout == 1.5
            assert client.options.timeout == 2.5
        finally:
            client.close()


class TestOperationTimeout:
    def test_none_is_a_noop(self):
        with operation_timeout(None):
            pass

    def test_sets_driver_deadline(self):
        import pymongo

        with patch.object(pymongo, "timeout", wraps=pymongo.timeout) as timeout:
            with operation_timeout(3):
                pass
        timeout.assert_called_once_with(3)
