"""Shared plumbing for the collection stores."""
import logging
from contextlib import contextmanager

from pymongo.errors import PyMongoError

from mflix.core.errors import StorageError
from mflix.db.session import operation_timeout

logger = logging.getLogger(__name__)


class BaseStore:
    """Stateless facade over one collection.

    Every public operation takes ``timeout`` (seconds); without it the
    store default applies.
    """

    def __init__(self, collection, timeout: float | None = None):
        self.collection = collection
        self.timeout = timeout

    @contextmanager
    def _operation(self, action: str, timeout: float | None = None):
        """Run driver calls under a deadline and wrap driver faults."""
        try:
            with operation_timeout(self.timeout if timeout is None else timeout):
                yield
        except PyMongoError as exc:
            logger.exception("%s on %s failed", action, self.collection.name)
            raise StorageError(f"{action} failed: {exc}", cause=exc) from exc
