"""Error taxonomy shared by stores and services."""
from enum import Enum


class ErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_CREDENTIAL = "invalid_credential"
    INVALID_INPUT = "invalid_input"
    DELETION_INCOMPLETE = "deletion_incomplete"
    STORAGE_ERROR = "storage_error"


class MflixError(Exception):
    """Base class for errors raised by the data layer."""

    code = ErrorCode.STORAGE_ERROR


class NotFoundError(MflixError):
    code = ErrorCode.NOT_FOUND


class AlreadyExistsError(MflixError):
    """Raised when an insert violates a unique index."""

    code = ErrorCode.ALREADY_EXISTS


class StorageError(MflixError):
    """Unexpected fault reported by the database driver."""

    code = ErrorCode.STORAGE_ERROR

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class MovieLookupError(StorageError):
    """The movie lookup failed; comment writes before it are already stored."""
