"""Comment store. Mutations only match comments owned by the caller."""
import logging

from pymongo.collection import Collection
from pymongo.read_concern import ReadConcern

from mflix.models.comment import Comment
from mflix.models.common import to_object_id
from mflix.schemas.outcomes import CommenterCount, UpdateOutcome
from mflix.stores.base import BaseStore

logger = logging.getLogger(__name__)


class CommentStore(BaseStore):
    def __init__(self, collection: Collection, strong_read: ReadConcern, timeout: float | None = None):
        super().__init__(collection, timeout)
        self.strong_read = strong_read

    def insert(self, comment: Comment, timeout: float | None = None) -> Comment:
        with self._operation("insert comment", timeout):
            result = self.collection.insert_one(comment.to_document())
        return comment.model_copy(update={"id": str(result.inserted_id)})

    def find(self, comment_id: str, timeout: float | None = None) -> Comment | None:
        oid = to_object_id(comment_id)
        if oid is None:
            return None
        with self._operation("find comment", timeout):
            doc = self.collection.find_one({"_id": oid})
        return Comment.model_validate(doc) if doc else None

    def update_text(self, email: str, comment_id: str, text: str, timeout: float | None = None) -> UpdateOutcome:
        oid = to_object_id(comment_id)
        if oid is None:
            return UpdateOutcome(matched_count=0, modified_count=0)
        with self._operation("update comment", timeout):
            result = self.collection.update_one(
                {"_id": oid, "email": email}, {"$set": {"text": text}}, upsert=False
            )
        if not result.matched_count:
            logger.warning("Comment %s not updated: no comment owned by %s", comment_id, email)
        return UpdateOutcome(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            acknowledged=result.acknowledged,
        )

    def delete(self, email: str, movie_id: str, comment_id: str, timeout: float | None = None) -> int:
        """Delete a comment of ``movie_id`` owned by ``email``; returns the deleted count."""
        oid, movie_oid = to_object_id(comment_id), to_object_id(movie_id)
        if oid is None or movie_oid is None:
            return 0
        with self._operation("delete comment", timeout):
            result = self.collection.delete_one({"_id": oid, "movie_id": movie_oid, "email": email})
        if not result.deleted_count:
            logger.warning("Comment %s not deleted: no comment owned by %s", comment_id, email)
        return result.deleted_count

    def most_active_commenters(self, limit: int, timeout: float | None = None) -> list[CommenterCount]:
        """Comment counts per email, highest first, read at majority."""
        pipeline = [
            {"$group": {"_id": "$email", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}},
            {"$limit": limit},
        ]
        with self._operation("aggregate commenters", timeout):
            rows = list(self.collection.with_options(read_concern=self.strong_read).aggregate(pipeline))
        return [CommenterCount.model_validate(row) for row in rows]
