"""Mflix data layer entry point: wires stores and services to a database."""
from contextlib import contextmanager
from dataclasses import dataclass

from pymongo import MongoClient

from mflix.core.config import Settings, get_settings
from mflix.core.security import build_pwd_context
from mflix.db.base import COMMENTS, SESSIONS, USERS, ensure_indexes
from mflix.db.session import StorageConfig, create_client, get_database
from mflix.services import AuthService, CommentService, ReportingService
from mflix.stores import CommentStore, MovieStore, SessionStore, UserStore


@dataclass
class DataLayer:
    users: UserStore
    sessions: SessionStore
    comments: CommentStore
    movies: MovieStore
    auth: AuthService
    comment_service: CommentService
    reporting: ReportingService


def build_data_layer(db, config: StorageConfig, settings: Settings) -> DataLayer:
    timeout = settings.operation_timeout_seconds
    users = UserStore(db[USERS], config.strong_write, timeout)
    sessions = SessionStore(db[SESSIONS], timeout)
    comments = CommentStore(db[COMMENTS], config.strong_read, timeout)
    movies = MovieStore(db, timeout)
    return DataLayer(
        users=users,
        sessions=sessions,
        comments=comments,
        movies=movies,
        auth=AuthService(users, sessions, build_pwd_context(settings.bcrypt_rounds)),
        comment_service=CommentService(comments, movies),
        reporting=ReportingService(comments, settings.top_commenters_limit),
    )


@contextmanager
def lifespan(settings: Settings | None = None, client: MongoClient | None = None):
    settings = settings or get_settings()
    owns_client = client is None
    if owns_client:
        client = create_client(settings)
    config = StorageConfig.from_settings(settings)
    db = get_database(client, config)

    try:
        ensure_indexes(db)
        yield build_data_layer(db, config, settings)
    finally:
        if owns_client:
            client.close()
