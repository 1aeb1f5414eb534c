"""Outcome returned by the account operations."""
from pydantic import BaseModel

from mflix.core.errors import ErrorCode
from mflix.models.user import User


class AuthResult(BaseModel):
    ok: bool
    user: User | None = None
    error: ErrorCode | None = None
    message: str | None = None

    @classmethod
    def success(cls, user: User | None = None, message: str | None = None) -> "AuthResult":
        return cls(ok=True, user=user, message=message)

    @classmethod
    def failure(cls, error: ErrorCode, message: str) -> "AuthResult":
        return cls(ok=False, error=error, message=message)
