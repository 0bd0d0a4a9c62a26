"""Password hasher port interface."""

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Salted, adaptive one-way password hashing."""

    def hash(self, password: str) -> str:
        """
        Hash a plain text password.

        Raises:
            EmptyPasswordError: If password is empty
            PasswordHashingError: If the hashing library fails
        """
        ...

    def verify(self, password_hash: str, password: str) -> None:
        """
        Check a password against a stored hash in constant time.

        Raises:
            PasswordMismatchError: If the password does not match
            PasswordVerificationError: If the hash is malformed or the library fails
        """
        ...

    def needs_rehash(self, password_hash: str) -> bool:
        """True if the hash was produced with outdated parameters."""
        ...
