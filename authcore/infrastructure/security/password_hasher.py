"""
Password hashing with Argon2id.

Argon2id is memory-hard and salted per hash; the work factor is fixed
by configuration so verification latency stays bounded.
"""

import logging

from argon2 import PasswordHasher
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from authcore.application.exceptions import (
    EmptyPasswordError,
    PasswordHashingError,
    PasswordMismatchError,
    PasswordVerificationError,
)


logger = logging.getLogger(__name__)


class Argon2PasswordHasher:
    """Password hasher adapter backed by argon2-cffi."""

    def __init__(
        self,
        time_cost: int = 2,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        """
        Initialize the hasher.

        Args:
            time_cost: Number of iterations
            memory_cost: Memory usage in KiB
            parallelism: Number of parallel lanes
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=32,
            salt_len=16,
        )

    def hash(self, password: str) -> str:
        """
        Hash a password.

        Args:
            password: Plain text password

        Returns:
            Encoded Argon2id hash (algorithm, parameters, salt and digest)

        Raises:
            EmptyPasswordError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            raise EmptyPasswordError()

        try:
            return self._hasher.hash(password)
        except HashingError as e:
            logger.error("Password hashing failed: %s", e)
            raise PasswordHashingError() from e

    def verify(self, password_hash: str, password: str) -> None:
        """
        Verify a password against a stored hash.

        Args:
            password_hash: Stored Argon2 hash
            password: Plain text candidate

        Raises:
            PasswordMismatchError: If the password does not match
            PasswordVerificationError: If the hash is malformed or verification fails
        """
        try:
            self._hasher.verify(password_hash, password)
        except VerifyMismatchError as e:
            raise PasswordMismatchError() from e
        except InvalidHashError as e:
            logger.error("Stored password hash is malformed")
            raise PasswordVerificationError("Stored password hash is malformed") from e
        except VerificationError as e:
            logger.error("Password verification failed: %s", e)
            raise PasswordVerificationError() from e

    def needs_rehash(self, password_hash: str) -> bool:
        """
        Check whether a hash was made with other parameters than the current ones.

        Args:
            password_hash: Stored hash

        Returns:
            True if the hash should be upgraded. False for hashes that cannot
            be parsed, since those fail verification anyway.
        """
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return False
