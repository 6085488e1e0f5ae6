"""Email infrastructure providers."""

from dishka import Scope, provide

from duo.adapter.resend import ResendInvitationMailer
from duo.config import EmailSettings, InvitationSettings
from duo.domain.service import InvitationMailer
from duo.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider sending through Resend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invitation_mailer(
        self, email_settings: EmailSettings, invitation_settings: InvitationSettings
    ) -> InvitationMailer:
        """Provide Resend invitation mailer.

        Without EMAIL__RESEND_API_KEY the mailer reports every send as
        undelivered and invitation links must be shared by hand.
        """
        return ResendInvitationMailer(
            settings=email_settings,
            expiry_days=invitation_settings.expiry_days,
        )
