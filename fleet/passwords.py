"""Argon2 password hashing for user accounts."""

from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHashError

password_hasher = PasswordHasher(encoding="utf-8")


def make_password(password: str) -> str:
    """
    Hash a plain-text password using Argon2.

    Args:
        password (str): The plain-text password to be hashed.

    Returns:
        str: The Argon2 hash of the given password.
    """
    return password_hasher.hash(password)


def check_password(password: str, hashed_password: str) -> bool:
    """
    Verify a plain-text password against a stored Argon2 hash.

    Returns:
        bool: True if the password matches the hash, False otherwise
        (including when the stored value is not an Argon2 hash).
    """
    try:
        return password_hasher.verify(hashed_password, password)
    except (VerificationError, InvalidHashError):
        return False
