from mflix.stores.comments import CommentStore
from mflix.stores.movies import MovieStore
from mflix.stores.sessions import SessionStore
from mflix.stores.users import UserStore

__all__ = ["UserStore", "SessionStore", "CommentStore", "MovieStore"]
