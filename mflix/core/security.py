"""Password hashing."""
from functools import lru_cache

from passlib.context import CryptContext

from mflix.core.config import get_settings


def build_pwd_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


@lru_cache
def default_pwd_context() -> CryptContext:
    return build_pwd_context(get_settings().bcrypt_rounds)


def hash_password(password: str, context: CryptContext | None = None) -> str:
    """Salted bcrypt hash of a clear-text password."""
    return (context or default_pwd_context()).hash(password)


def verify_password(plain: str, hashed: str | None, context: CryptContext | None = None) -> bool:
    """True iff plain matches hashed. A malformed or missing hash is a mismatch."""
    if not hashed:
        return False
    try:
        return (context or default_pwd_context()).verify(plain, hashed)
    except (ValueError, TypeError):
        return False

