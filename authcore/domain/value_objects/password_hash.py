"""Password hash value object."""

from dataclasses import dataclass

from authcore.domain.exceptions import InvalidPasswordError


@dataclass(frozen=True)
class PasswordHash:
    """
    Password hash value object.

    Immutable value object representing a hashed password.
    It must only ever hold the output of the password hasher, never
    plain text, and is never rendered outward.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate password hash."""
        if not self.value:
            raise InvalidPasswordError("Password hash cannot be empty")

        if len(self.value) < 20:
            raise InvalidPasswordError(
                "Invalid password hash format (too short, likely not hashed)"
            )

        if any(ch.isspace() for ch in self.value):
            raise InvalidPasswordError(
                "Invalid password hash format (contains whitespace)"
            )

    def __str__(self) -> str:
        return "***REDACTED***"

    def __repr__(self) -> str:
        return "PasswordHash(***REDACTED***)"
