"""Helpers shared by use cases for turning request fields into domain values."""

from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from duo.domain.error import ValidationError
from duo.domain.value import Email, InvitationToken, UserId


def parse_user_id(value: str) -> UserId:
    try:
        return UserId(UUID(value))
    except ValueError:
        raise ValidationError("Invalid user ID")


def parse_email(value: str | None, missing_message: str = "Email is required") -> Email:
    """Normalize an email from a request.

    Raises:
        ValidationError: If the address is empty or malformed
    """
    if value is None or not value.strip():
        raise ValidationError(missing_message)
    try:
        return Email(root=value)
    except PydanticValidationError:
        raise ValidationError("Please enter a valid email address")


def parse_token(value: str) -> InvitationToken:
    """Wrap a raw token from a URL.

    Raises:
        ValidationError: If the token is empty or oversized
    """
    try:
        return InvitationToken(root=value)
    except PydanticValidationError:
        raise ValidationError("Invalid invitation token")
