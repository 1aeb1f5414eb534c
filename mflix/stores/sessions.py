"""Session store: at most one live session per user."""
from mflix.models.user import Session
from mflix.stores.base import BaseStore


class SessionStore(BaseStore):
    def find_by_user(self, email: str, timeout: float | None = None) -> Session | None:
        with self._operation("find session", timeout):
            doc = self.collection.find_one({"user_id": email})
        return Session.model_validate(doc) if doc else None

    def upsert(self, email: str, token: str, timeout: float | None = None) -> None:
        """Create or replace the session of ``email`` in one atomic write."""
        with self._operation("upsert session", timeout):
            self.collection.update_one(
                {"user_id": email},
                {"$set": {"user_id": email, "jwt": token}},
                upsert=True,
            )

    def delete(self, email: str, timeout: float | None = None) -> int:
        with self._operation("delete session", timeout):
            result = self.collection.delete_one({"user_id": email})
        return result.deleted_count
