"""Password hashing helpers."""
from passlib.context import CryptContext


BCRYPT_ROUNDS = 10

_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash ``password`` with a freshly salted bcrypt digest."""

    if not isinstance(password, str):
        raise TypeError("password must be a string")
    return _context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Return ``True`` if ``password`` matches ``hashed_password``.

    Malformed or unknown digests count as a mismatch.
    """

    if not password or not hashed_password:
        return False
    try:
        return _context.verify(password, hashed_password)
    except (TypeError, ValueError):
        return False


def needs_rehash(hashed_password: str) -> bool:
    """Return ``True`` if the hash should be upgraded."""

    if not hashed_password:
        return True
    try:
        return _context.needs_update(hashed_password)
    except ValueError:
        return True


__all__ = ["BCRYPT_ROUNDS", "hash_password", "needs_rehash", "verify_password"]
