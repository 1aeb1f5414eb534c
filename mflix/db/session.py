"""MongoDB client, database handle and per-operation deadlines."""
from contextlib import nullcontext
from dataclasses import dataclass, field

import pymongo
from bson.codec_options import CodecOptions
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.read_concern import ReadConcern
from pymongo.write_concern import WriteConcern

from mflix.core.config import Settings, get_settings


@dataclass(frozen=True)
class StorageConfig:
    """Serialization and consistency options handed to the database handle.

    Immutable and passed explicitly; the driver keeps no global registry.
    """

    database_name: str = "sample_mflix"
    codec_options: CodecOptions = field(default_factory=lambda: CodecOptions(tz_aware=True))
    # account creation acknowledges on a majority of replicas
    strong_write: WriteConcern = field(default_factory=lambda: WriteConcern(w="majority"))
    # reports never read data that could be rolled back
    strong_read: ReadConcern = field(default_factory=lambda: ReadConcern("majority"))

    @classmethod
    def from_settings(cls, settings: Settings) -> "StorageConfig":
        return cls(database_name=settings.database_name)


def create_client(settings: Settings | None = None) -> MongoClient:
    settings = settings or get_settings()
    options = {"serverSelectionTimeoutMS": settings.server_selection_timeout_ms}
    if settings.operation_timeout_seconds:
        options["timeoutMS"] = int(settings.operation_timeout_seconds * 1000)
    return MongoClient(settings.mongodb_uri, **options)


def get_database(client: MongoClient, config: StorageConfig) -> Database:
    return client.get_database(config.database_name, codec_options=config.codec_options)


def operation_timeout(seconds: float | None):
    """Deadline block for the driver calls inside it; None means no deadline."""
    if seconds is None:
        return nullcontext()
    return pymongo.timeout(seconds)
