"""Collection names and the indexes the data layer relies on."""
import logging

from pymongo import ASCENDING
from pymongo.database import Database

logger = logging.getLogger(__name__)

USERS = "users"
SESSIONS = "sessions"
COMMENTS = "comments"
MOVIES = "movies"

__all__ = ["USERS", "SESSIONS", "COMMENTS", "MOVIES", "ensure_indexes"]


def ensure_indexes(db: Database) -> None:
    """Create indexes; uniqueness of emails and sessions is enforced here."""
    db[USERS].create_index([("email", ASCENDING)], unique=True, name="uq_users_email")
    db[SESSIONS].create_index([("user_id", ASCENDING)], unique=True, name="uq_sessions_user_id")
    db[COMMENTS].create_index([("movie_id", ASCENDING)], name="ix_comments_movie_id")
    db[COMMENTS].create_index([("email", ASCENDING)], name="ix_comments_email")
    logger.info("Indexes ensured on database %s", db.name)
