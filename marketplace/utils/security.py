"""Password hashing and session tokens for the local auth service."""
import secrets

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_hasher = PasswordHasher(time_cost=3, memory_cost=65536, parallelism=4)


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def check_password(stored_hash: str, password: str) -> tuple[bool, str | None]:
    """
    Verify ``password`` against ``stored_hash``.

    Returns ``(matched, upgraded_hash)``. ``upgraded_hash`` is only set when
    the password matched and the stored hash was made with parameters other
    than the current ones, so the caller can persist the replacement.
    """
    try:
        _hasher.verify(stored_hash, password)
    except (VerificationError, InvalidHashError):
        return False, None
    if _hasher.check_needs_rehash(stored_hash):
        return True, _hasher.hash(password)
    return True, None


def generate_session_token() -> str:
    return secrets.token_urlsafe(32)
