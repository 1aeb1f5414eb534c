"""Read-only reports over the comments collection."""
from mflix.schemas.outcomes import CommenterCount
from mflix.stores.comments import CommentStore


class ReportingService:
    def __init__(self, comments: CommentStore, default_limit: int = 20):
        self.comments = comments
        self.default_limit = default_limit

    def most_active_commenters(self, limit: int | None = None, timeout: float | None = None) -> list[CommenterCount]:
        limit = self.default_limit if limit is None else limit
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        return self.comments.most_active_commenters(limit, timeout=timeout)
