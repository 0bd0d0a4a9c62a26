"""Permission value object."""

from dataclasses import dataclass

from authcore.domain.exceptions import InvalidPermissionError


WILDCARD = "*"
MAX_PERMISSION_LENGTH = 100


@dataclass(frozen=True, order=True)
class Permission:
    """
    A single permission string such as ``workflow:read``.

    Permissions are opaque to the core; only the wildcard ``*`` has a
    meaning of its own (it grants every permission).
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidPermissionError(str(self.value))

        if len(self.value) > MAX_PERMISSION_LENGTH:
            raise InvalidPermissionError(self.value)

        if any(ch.isspace() for ch in self.value):
            raise InvalidPermissionError(self.value)

    @classmethod
    def wildcard(cls) -> "Permission":
        return cls(WILDCARD)

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD

    @property
    def resource(self) -> str:
        """Part before the first ``:`` (the whole value if there is none)."""
        return self.value.split(":", 1)[0]

    def __str__(self) -> str:
        return self.value
