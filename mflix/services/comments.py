"""Comment operations that return the refreshed movie view."""
import logging
from datetime import datetime, timezone

from mflix.core.errors import NotFoundError
from mflix.db.session import operation_timeout
from mflix.models.comment import Comment, Movie
from mflix.models.common import to_object_id
from mflix.models.user import User
from mflix.schemas.outcomes import PostedComment, UpdateOutcome
from mflix.stores.comments import CommentStore
from mflix.stores.movies import MovieStore

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, comments: CommentStore, movies: MovieStore):
        self.comments = comments
        self.movies = movies

    def add(self, user: User, movie_id: str, text: str, timeout: float | None = None) -> PostedComment:
        """Store a comment stamped with the author and UTC time.

        A failing comment write raises StorageError; a failing movie refresh
        raises MovieLookupError.
        """
        if to_object_id(movie_id) is None:
            raise NotFoundError(f"Unknown movie id {movie_id!r}")
        comment = Comment(
            name=user.name,
            email=user.email,
            movie_id=movie_id,
            text=text,
            date=datetime.now(timezone.utc),
        )
        with operation_timeout(timeout):
            stored = self.comments.insert(comment, timeout=timeout)
            movie = self.movies.get_movie(movie_id, timeout=timeout)
        return PostedComment(comment=stored, movie=movie)

    def update(
        self, user: User, movie_id: str, comment_id: str, text: str, timeout: float | None = None
    ) -> UpdateOutcome:
        """Edit the text of a comment owned by ``user``.

        ``matched_count == 0`` means the comment does not exist or belongs to
        someone else.
        """
        return self.comments.update_text(user.email, comment_id, text, timeout=timeout)

    def delete(self, user: User, movie_id: str, comment_id: str, timeout: float | None = None) -> Movie | None:
        """Delete a comment owned by ``user`` and return the movie either way."""
        with operation_timeout(timeout):
            self.comments.delete(user.email, movie_id, comment_id, timeout=timeout)
            return self.movies.get_movie(movie_id, timeout=timeout)
