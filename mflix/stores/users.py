"""User store: account records keyed by email."""
import logging

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError
from pymongo.write_concern import WriteConcern

from mflix.core.errors import AlreadyExistsError
from mflix.models.user import User
from mflix.schemas.outcomes import UpdateOutcome
from mflix.stores.base import BaseStore

logger = logging.getLogger(__name__)


class UserStore(BaseStore):
    def __init__(self, collection: Collection, strong_write: WriteConcern, timeout: float | None = None):
        super().__init__(collection, timeout)
        self.strong_write = strong_write

    def find_by_email(self, email: str, timeout: float | None = None) -> User | None:
        with self._operation("find user", timeout):
            doc = self.collection.find_one({"email": email})
        return User.model_validate(doc) if doc else None

    def insert(self, user: User, timeout: float | None = None) -> User:
        """Insert a new account with majority acknowledgement.

        Raises AlreadyExistsError when the email is taken.
        """
        with self._operation("insert user", timeout):
            try:
                result = self.collection.with_options(write_concern=self.strong_write).insert_one(
                    user.to_document()
                )
            except DuplicateKeyError as exc:
                raise AlreadyExistsError(f"A user with email {user.email} already exists.") from exc
        return user.model_copy(update={"id": str(result.inserted_id)})

    def update_preferences(
        self, email: str, preferences: dict[str, str], timeout: float | None = None
    ) -> UpdateOutcome:
        with self._operation("update preferences", timeout):
            result = self.collection.update_one(
                {"email": email}, {"$set": {"preferences": dict(preferences)}}, upsert=False
            )
        return UpdateOutcome(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            acknowledged=result.acknowledged,
        )

    def delete(self, email: str, timeout: float | None = None) -> int:
        """Delete by email; deleting a missing user is not an error."""
        with self._operation("delete user", timeout):
            result = self.collection.delete_one({"email": email})
        return result.deleted_count

    def promote_to_admin(self, user: User, timeout: float | None = None) -> User | None:
        with self._operation("promote user", timeout):
            self.collection.update_one({"email": user.email}, {"$set": {"isAdmin": True}})
            doc = self.collection.find_one({"email": user.email})
        if doc:
            logger.info("User %s promoted to admin", user.email)
        return User.model_validate(doc) if doc else None
