"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class SelfPairingError(ValidationError):
    """Raised when a user tries to pair with their own account."""

    def __init__(self) -> None:
        super().__init__("You cannot connect with yourself")


class PartnerNotFoundError(NotFoundError):
    """No registered account owns the partner email.

    Triggers the fallback to issuing an invitation.
    """

    def __init__(self, partner_email: str):
        super().__init__("Partner", partner_email)


class InviterNotFoundError(NotFoundError):
    """The account behind an invitation no longer has a profile."""

    def __init__(self, inviter_id: str):
        super().__init__("Inviter", inviter_id)


class InvalidInvitationTokenError(NotFoundError):
    """No invitation exists for the given token."""

    def __init__(self, token: str):
        # Never echo the full token back
        super().__init__("Invitation", token[:8] + "...")


class AlreadyPairedError(BusinessRuleViolationError):
    """One of the users already belongs to a couple."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} is already part of a couple")


class InvitationAlreadyUsedError(BusinessRuleViolationError):
    """The invitation is no longer pending."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"This invitation has already been used (status: {status})")


class InvitationExpiredError(BusinessRuleViolationError):
    """The invitation's expiry has passed."""

    def __init__(self) -> None:
        super().__init__("This invitation has expired")


class EmailMismatchError(DomainError):
    """The accepting account's email differs from the invited address."""

    def __init__(self) -> None:
        super().__init__("This invitation was sent to a different email address")
