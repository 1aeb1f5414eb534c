"""Movie lookup used to return a fresh movie view after comment writes."""
from pymongo import DESCENDING
from pymongo.database import Database

from mflix.core.errors import MovieLookupError, StorageError
from mflix.db.base import COMMENTS, MOVIES
from mflix.models.comment import Movie
from mflix.models.common import to_object_id
from mflix.stores.base import BaseStore


class MovieStore(BaseStore):
    def __init__(self, db: Database, timeout: float | None = None):
        super().__init__(db[MOVIES], timeout)
        self.comments = db[COMMENTS]

    def get_movie(self, movie_id: str, timeout: float | None = None) -> Movie | None:
        """Movie with its comments, newest first; None if unknown."""
        oid = to_object_id(movie_id)
        if oid is None:
            return None
        try:
            with self._operation("get movie", timeout):
                doc = self.collection.find_one({"_id": oid})
                if doc is None:
                    return None
                doc["comments"] = list(self.comments.find({"movie_id": oid}).sort("date", DESCENDING))
        except StorageError as exc:
            raise MovieLookupError(f"Movie lookup for {movie_id} failed", cause=exc.cause) from exc
        return Movie.model_validate(doc)
