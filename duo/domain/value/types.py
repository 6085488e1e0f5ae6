"""Domain value objects for Duo.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Any

from pydantic import EmailStr, field_validator

from duo.domain.value.common import RootValueObject, ValueObject


class InvitationStatus(str, Enum):
    """Status of a partner invitation.

    Transitions only ever leave PENDING.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"


class Email(RootValueObject[EmailStr]):
    """Email address in canonical form.

    Surrounding whitespace is stripped and the address is lowercased, so two
    spellings of the same mailbox compare equal.
    """

    @field_validator("root", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("root")
    @classmethod
    def lowercase(cls, v: str) -> str:
        # EmailStr only normalizes the domain part
        return v.lower()


class InvitationToken(RootValueObject[str]):
    """URL-safe invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def redacted(self) -> str:
        """Token prefix safe to put in logs."""
        return self.root[:8] + "..."


class EmailDeliveryOutcome(ValueObject):
    """Observable result of a best-effort email send."""

    delivered: bool
    provider_message_id: str | None = None
    provider_error: Any = None
