"""Account lifecycle: register, login, logout, deletion, preferences."""
from __future__ import annotations

import hmac
import logging
import re
from dataclasses import dataclass
from typing import Union

from passlib.context import CryptContext

from mflix.core.errors import AlreadyExistsError, ErrorCode, StorageError
from mflix.core.security import hash_password, verify_password
from mflix.db.session import operation_timeout
from mflix.models.user import Session, User
from mflix.schemas.auth import AuthResult
from mflix.stores.sessions import SessionStore
from mflix.stores.users import UserStore

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 8
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class PlainPassword:
    """Clear-text password typed by the user."""

    password: str


@dataclass(frozen=True)
class HashedPassword:
    """Hash previously handed out by this service, compared verbatim."""

    hashed: str


Credential = Union[PlainPassword, HashedPassword]


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class AuthService:
    def __init__(
        self,
        users: UserStore,
        sessions: SessionStore,
        pwd_context: CryptContext | None = None,
    ):
        self.users = users
        self.sessions = sessions
        self.pwd_context = pwd_context

    def register(self, name: str, email: str, password: str, timeout: float | None = None) -> AuthResult:
        email = normalize_email(email)
        name = (name or "").strip()
        password = password or ""

        if not name:
            return AuthResult.failure(ErrorCode.INVALID_INPUT, "A name is required.")
        if not EMAIL_RE.match(email):
            return AuthResult.failure(ErrorCode.INVALID_INPUT, "The email address is not valid.")
        if len(password) < MIN_PASSWORD_LENGTH:
            return AuthResult.failure(
                ErrorCode.INVALID_INPUT,
                f"The password must be at least {MIN_PASSWORD_LENGTH} characters.",
            )
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            return AuthResult.failure(
                ErrorCode.INVALID_INPUT,
                f"The password must be at most {BCRYPT_MAX_BYTES} bytes.",
            )

        user = User(name=name, email=email, hashed_password=hash_password(password, self.pwd_context))
        try:
            with operation_timeout(timeout):
                self.users.insert(user, timeout=timeout)
                stored = self.users.find_by_email(email, timeout=timeout)
        except AlreadyExistsError:
            return AuthResult.failure(ErrorCode.ALREADY_EXISTS, "A user with the given email already exists.")
        except StorageError as exc:
            return AuthResult.failure(ErrorCode.STORAGE_ERROR, str(exc))

        if stored is None:
            return AuthResult.failure(ErrorCode.STORAGE_ERROR, "The new user could not be read back.")
        logger.info("Registered user %s", email)
        return AuthResult.success(stored)

    def login(self, email: str, credential: Credential, token: str, timeout: float | None = None) -> AuthResult:
        """Check the credential and bind ``token`` as the user's only session."""
        if not isinstance(credential, (PlainPassword, HashedPassword)):
            raise TypeError(f"Unsupported credential type: {type(credential).__name__}")
        email = normalize_email(email)
        try:
            with operation_timeout(timeout):
                stored = self.users.find_by_email(email, timeout=timeout)
                if stored is None:
                    return AuthResult.failure(ErrorCode.NOT_FOUND, "No user found. Please check the email address.")

                if not self._credential_matches(credential, stored.hashed_password):
                    return AuthResult.failure(ErrorCode.INVALID_CREDENTIAL, "The credential provided is not valid.")

                self.sessions.upsert(email, token, timeout=timeout)
        except StorageError as exc:
            return AuthResult.failure(ErrorCode.STORAGE_ERROR, str(exc))

        logger.info("User %s logged in", email)
        return AuthResult.success(stored.model_copy(update={"auth_token": token}))

    def _credential_matches(self, credential: Credential, stored_hash: str) -> bool:
        if isinstance(credential, HashedPassword):
            return hmac.compare_digest(credential.hashed.encode("utf-8"), stored_hash.encode("utf-8"))
        return verify_password(credential.password, stored_hash, self.pwd_context)

    def logout(self, email: str, timeout: float | None = None) -> AuthResult:
        email = normalize_email(email)
        try:
            self.sessions.delete(email, timeout=timeout)
        except StorageError as exc:
            return AuthResult.failure(ErrorCode.STORAGE_ERROR, str(exc))
        return AuthResult.success(message="User logged out.")

    def current_session(self, email: str, timeout: float | None = None) -> Session | None:
        return self.sessions.find_by_user(normalize_email(email), timeout=timeout)

    def get_user(self, email: str, timeout: float | None = None) -> User | None:
        return self.users.find_by_email(normalize_email(email), timeout=timeout)

    def delete_account(self, email: str, timeout: float | None = None) -> AuthResult:
        """Remove the user and their session, then confirm both are gone.

        Not a transaction: a DELETION_INCOMPLETE result can be retried.
        """
        email = normalize_email(email)
        failed = []
        with operation_timeout(timeout):
            # both deletes are attempted; verification below decides the result
            for name, step in (("user", self.users.delete), ("session", self.sessions.delete)):
                try:
                    step(email, timeout=timeout)
                except StorageError as exc:
                    failed.append(f"{name}: {exc}")

            try:
                user_left = self.users.find_by_email(email, timeout=timeout)
                session_left = self.sessions.find_by_user(email, timeout=timeout)
            except StorageError as exc:
                return AuthResult.failure(ErrorCode.STORAGE_ERROR, str(exc))

        if user_left is None and session_left is None:
            logger.info("Deleted user %s", email)
            return AuthResult.success(message="User deleted.")
        logger.warning(
            "Deletion of %s incomplete (user left: %s, session left: %s, errors: %s)",
            email, user_left is not None, session_left is not None, failed,
        )
        return AuthResult.failure(ErrorCode.DELETION_INCOMPLETE, "User deletion was unsuccessful.")

    def update_preferences(
        self, email: str, preferences: dict[str, str], timeout: float | None = None
    ) -> AuthResult:
        email = normalize_email(email)
        try:
            outcome = self.users.update_preferences(email, preferences, timeout=timeout)
        except StorageError as exc:
            return AuthResult.failure(ErrorCode.STORAGE_ERROR, str(exc))
        if not outcome.matched:
            return AuthResult.failure(ErrorCode.NOT_FOUND, "No user found with that email.")
        return AuthResult.success(message="Preferences updated.")

    def make_admin(self, email: str, timeout: float | None = None) -> AuthResult:
        email = normalize_email(email)
        try:
            with operation_timeout(timeout):
                user = self.users.find_by_email(email, timeout=timeout)
                if user is None:
                    return AuthResult.failure(ErrorCode.NOT_FOUND, "No user found with that email.")
                promoted = self.users.promote_to_admin(user, timeout=timeout)
        except StorageError as exc:
            return AuthResult.failure(ErrorCode.STORAGE_ERROR, str(exc))
        if promoted is None:
            return AuthResult.failure(ErrorCode.NOT_FOUND, "No user found with that email.")
        return AuthResult.success(promoted)
