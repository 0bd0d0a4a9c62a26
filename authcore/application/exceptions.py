"""Application layer exceptions."""

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of error."""
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


# --- Validation -------------------------------------------------------------


class ValidationError(ApplicationError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        constraint: Optional[str] = None,
        error_code: str = "VALIDATION_ERROR",
    ):
        """
        Initialize validation error.

        Args:
            message: Human-readable error message
            field: Field that failed validation
            constraint: Validation constraint that was violated
            error_code: Machine-readable error code
        """
        details = {}
        if field:
            details["field"] = field
        if constraint:
            details["constraint"] = constraint

        super().__init__(message, error_code, details)


class EmailInvalidError(ValidationError):
    """Raised when an email address fails either validation gate."""

    def __init__(self, message: str = "Invalid email format"):
        super().__init__(message, field="email", constraint="format", error_code="EMAIL_INVALID")


class PasswordTooWeakError(ValidationError):
    """Raised when a password is shorter than the minimum length."""

    def __init__(self, message: str = "Password must be at least 8 characters long"):
        super().__init__(message, field="password", constraint="min_length", error_code="PASSWORD_TOO_WEAK")


class EmptyPasswordError(ValidationError):
    """Raised when an empty password is given to the hasher."""

    def __init__(self, message: str = "Password cannot be empty"):
        super().__init__(message, field="password", constraint="required", error_code="PASSWORD_EMPTY")


# --- Conflict ---------------------------------------------------------------


class ConflictError(ApplicationError):
    """Raised when an operation conflicts with current state."""

    def __init__(
        self,
        message: str = "Resource conflict",
        error_code: str = "CONFLICT",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details)


class AlreadyExistsError(ConflictError):
    """Raised when attempting to create a resource that already exists."""

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
    ):
        """
        Initialize already exists error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource (e.g., 'User', 'Role')
            field: Field that has duplicate value
        """
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field

        super().__init__(message, "ALREADY_EXISTS", details)


class EmailAlreadyRegisteredError(AlreadyExistsError):
    """Raised when registering an email that belongs to a live account."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message, resource_type="User", field="email")
        self.error_code = "EMAIL_ALREADY_REGISTERED"


# --- Credentials ------------------------------------------------------------

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class CredentialError(ApplicationError):
    """
    Raised when authentication fails.

    ``reason`` is kept for logging only; it is never part of the message
    so a caller cannot tell an unknown email from a wrong password.
    """

    def __init__(
        self,
        message: str = INVALID_CREDENTIALS_MESSAGE,
        reason: Optional[str] = None,
        error_code: str = "INVALID_CREDENTIALS",
    ):
        super().__init__(message, error_code)
        self.reason = reason


class AccountDisabledError(CredentialError):
    """Raised when a correctly authenticated account is disabled."""

    def __init__(self, message: str = "Account is disabled"):
        super().__init__(message, reason="account_disabled", error_code="ACCOUNT_DISABLED")


# --- Not found --------------------------------------------------------------


class NotFoundError(ApplicationError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        """
        Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource (e.g., 'User', 'Session')
            resource_id: ID of the resource that was not found
        """
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(message, "NOT_FOUND", details)


class SessionNotFoundError(NotFoundError):
    """Raised when a refresh token has no live session (expired, rotated or logged out)."""

    def __init__(self, message: str = "Invalid or expired refresh token"):
        super().__init__(message, resource_type="Session")
        self.error_code = "SESSION_NOT_FOUND"


# --- Tokens -----------------------------------------------------------------


class TokenError(ApplicationError):
    """Base class for token validation failures."""

    def __init__(self, message: str = "Invalid token", error_code: str = "TOKEN_INVALID"):
        super().__init__(message, error_code)


class MalformedTokenError(TokenError):
    """Raised when a token cannot be parsed or lacks required claims."""

    def __init__(self, message: str = "Malformed token"):
        super().__init__(message, "TOKEN_MALFORMED")


class TokenSignatureError(TokenError):
    """Raised when a token signature does not verify."""

    def __init__(self, message: str = "Invalid token signature"):
        super().__init__(message, "TOKEN_SIGNATURE_INVALID")


class TokenExpiredError(TokenError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, "TOKEN_EXPIRED")


class UnexpectedAlgorithmError(TokenError):
    """Raised when a token header announces an algorithm other than the configured one."""

    def __init__(self, algorithm: Optional[str] = None):
        super().__init__(f"Unexpected signing algorithm: {algorithm}", "TOKEN_ALGORITHM_UNEXPECTED")
        self.algorithm = algorithm


# --- Stores -----------------------------------------------------------------


class StoreError(ApplicationError):
    """Raised when the identity or session store fails."""

    def __init__(
        self,
        message: str = "Storage backend unavailable",
        store: Optional[str] = None,
        error_code: str = "STORE_ERROR",
    ):
        details = {"store": store} if store else {}
        super().__init__(message, error_code, details)


class StoreTimeoutError(StoreError):
    """Raised when a store call exceeds its deadline."""

    def __init__(self, message: str = "Storage backend timed out", store: Optional[str] = None):
        super().__init__(message, store, "STORE_TIMEOUT")


# --- Password hashing -------------------------------------------------------


class PasswordHashingError(ApplicationError):
    """Raised when the hashing library fails to produce a hash."""

    def __init__(self, message: str = "Failed to hash password"):
        super().__init__(message, "PASSWORD_HASHING_FAILED")


class PasswordVerificationError(ApplicationError):
    """Raised when a stored hash cannot be checked (malformed hash or library failure)."""

    def __init__(self, message: str = "Failed to verify password"):
        super().__init__(message, "PASSWORD_VERIFICATION_FAILED")


class PasswordMismatchError(ApplicationError):
    """Raised when a password does not match the stored hash."""

    def __init__(self, message: str = "Password does not match"):
        super().__init__(message, "PASSWORD_MISMATCH")
