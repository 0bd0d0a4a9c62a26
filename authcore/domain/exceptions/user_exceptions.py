"""User domain exceptions."""

from authcore.domain.exceptions.base import DomainException


class UserDomainException(DomainException):
    """Base exception for user-related domain errors."""


class InvalidEmailError(UserDomainException):
    """Raised when an email address is invalid."""

    def __init__(self, email: str, reason: str | None = None):
        self.email = email
        self.reason = reason
        message = f"Invalid email format: {email}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message=message, code="INVALID_EMAIL")


class InvalidPasswordError(UserDomainException):
    """Raised when a password does not meet requirements."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid password: {reason}",
            code="INVALID_PASSWORD"
        )


class InvalidDisplayNameError(UserDomainException):
    """Raised when a display name is empty or too long."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid name: {reason}",
            code="INVALID_NAME"
        )


class InvalidUserStateTransitionError(UserDomainException):
    """Raised when attempting an invalid state transition."""

    def __init__(self, current_state: str, attempted_transition: str):
        super().__init__(
            message=f"Cannot {attempted_transition} user in state: {current_state}",
            code="INVALID_USER_STATE_TRANSITION"
        )
