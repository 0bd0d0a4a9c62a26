"""Email value object."""

import re
from dataclasses import dataclass

from authcore.domain.exceptions import InvalidEmailError


EMAIL_REGEX = re.compile(
    r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"
)


@dataclass(frozen=True)
class Email:
    """
    Email value object with validation.

    Immutable value object representing an email address.
    The address is kept exactly as provided: lookups and uniqueness
    are case-sensitive.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format."""
        if not self.value:
            raise InvalidEmailError(self.value, "email cannot be empty")

        if not EMAIL_REGEX.match(self.value):
            raise InvalidEmailError(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email(value={self.value!r})"

    @property
    def domain(self) -> str:
        """Extract domain part from email address."""
        return self.value.rsplit("@", 1)[1]

    @property
    def local_part(self) -> str:
        """Extract local part (before @) from email address."""
        return self.value.rsplit("@", 1)[0]
