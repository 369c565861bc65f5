import secrets

from passlib.hash import pbkdf2_sha512

from legacore.config import settings

SALT_SIZE = 16


def hash_password(password: str) -> tuple[str, str]:
    """
    Hash a password with a fresh random salt.

    Args:
        password: Plain-text password

    Returns:
        Tuple of (hash, salt) where salt is hex-encoded. Both are stored on
        the user row and must never be returned by the API.
    """
    salt = secrets.token_bytes(SALT_SIZE)
    hashed = pbkdf2_sha512.using(salt=salt, rounds=settings.PASSWORD_HASH_ROUNDS).hash(password)
    return hashed, salt.hex()


def verify_password(password: str, hashed: str, salt: str) -> bool:
    """Check a plain-text password against a stored (hash, salt) pair"""
    try:
        stored = pbkdf2_sha512.from_string(hashed)
        expected_salt = bytes.fromhex(salt)
    except ValueError:
        return False
    if stored.salt != expected_salt:
        return False
    return pbkdf2_sha512.verify(password, hashed)
