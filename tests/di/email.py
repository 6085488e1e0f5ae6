"""Mock email providers for testing."""

from dishka import Scope, provide

from duo.adapter.resend import MockInvitationMailer
from duo.domain.service import InvitationMailer
from duo.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider recording sends instead of calling Resend."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invitation_mailer(self) -> InvitationMailer:
        """Provide mock invitation mailer."""
        return MockInvitationMailer()
