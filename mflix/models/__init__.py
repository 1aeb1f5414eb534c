from mflix.models.comment import Comment, Movie
from mflix.models.user import Session, User

__all__ = ["User", "Session", "Comment", "Movie"]
