"""User validation domain service."""

from email_validator import EmailNotValidError, validate_email

from authcore.domain.entities.user import validate_display_name
from authcore.domain.exceptions import InvalidEmailError, InvalidPasswordError
from authcore.domain.value_objects.email import Email


class UserValidationService:
    """
    Domain service for registration input rules.

    Rules are applied in a fixed order so the first violated rule is
    the one reported.
    """

    MIN_PASSWORD_LENGTH = 8

    @staticmethod
    def validate_email(raw_email: str) -> Email:
        """
        Validate an email address with two independent gates.

        The address must parse as an RFC address and must also match the
        strict pattern of the Email value object. The submitted string is
        returned unchanged (no case folding).

        Args:
            raw_email: Email as submitted

        Returns:
            Email value object

        Raises:
            InvalidEmailError: If either gate rejects the address
        """
        try:
            validate_email(raw_email, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidEmailError(raw_email, str(e)) from e
        return Email(raw_email)

    @classmethod
    def validate_password_strength(cls, plain_password: str) -> None:
        """
        Validate that a plain password meets the length requirement.

        Must be called BEFORE hashing the password.

        Raises:
            InvalidPasswordError: If password is too short
        """
        if len(plain_password) < cls.MIN_PASSWORD_LENGTH:
            raise InvalidPasswordError(
                f"Password must be at least {cls.MIN_PASSWORD_LENGTH} characters long"
            )

    @staticmethod
    def validate_name(name: str) -> str:
        return validate_display_name(name)
