"""Resend invitation mailer.

Sends partner invitation emails through the Resend HTTP API.
"""

import asyncio

import httpx
import logfire

from duo.adapter.error import ProviderError
from duo.adapter.resend.template import invitation_subject, render_invitation_html
from duo.config import EmailSettings
from duo.domain.service.pairing_service import InvitationMailer
from duo.domain.value import Email, EmailDeliveryOutcome


class ResendInvitationMailer(InvitationMailer):
    """InvitationMailer backed by the Resend API.

    Rejections are returned as an undelivered outcome; transport failures
    raise ProviderError.
    """

    def __init__(
        self,
        settings: EmailSettings,
        expiry_days: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Resend mailer.

        Args:
            settings: Email settings (API key, sender, timeout)
            expiry_days: Invitation lifetime quoted in the email
            transport: Optional httpx transport, used by tests
        """
        self.settings = settings
        self.expiry_days = expiry_days
        self.transport = transport

    async def send_invitation_email(
        self, to_address: Email, inviter_display_name: str, invitation_link: str
    ) -> EmailDeliveryOutcome:
        """Send an invitation email via Resend.

        Args:
            to_address: Invitee address
            inviter_display_name: Name shown as the sender of the invitation
            invitation_link: Link carrying the invitation token

        Returns:
            Delivery outcome with the Resend message ID or error payload

        Raises:
            ProviderError: If Resend could not be reached
        """
        if not self.settings.resend_api_key:
            logfire.warn("Resend API key not configured, email not sent")
            return EmailDeliveryOutcome(
                delivered=False, provider_error="Email delivery is not configured"
            )

        payload = {
            "from": self.settings.from_address,
            "to": [to_address.root],
            "subject": invitation_subject(inviter_display_name),
            "html": render_invitation_html(
                inviter_display_name, invitation_link, self.expiry_days
            ),
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.settings.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.settings.resend_api_key}"},
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Resend request failed", error=str(e))
            raise ProviderError(f"Resend request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {"message": response.text}

        if response.is_success:
            logfire.info("Invitation email sent", message_id=body.get("id"))
            return EmailDeliveryOutcome(
                delivered=True, provider_message_id=body.get("id")
            )

        logfire.error(
            "Resend rejected invitation email",
            status_code=response.status_code,
            error=body,
        )
        return EmailDeliveryOutcome(delivered=False, provider_error=body)


class MockInvitationMailer(InvitationMailer):
    """Mock mailer for testing.

    Records every send. Set ``fail`` to simulate a provider rejection, or
    ``delay_seconds`` to simulate a slow provider.
    """

    def __init__(self, fail: bool = False, delay_seconds: float = 0.0) -> None:
        self.fail = fail
        self.delay_seconds = delay_seconds
        self.sent: list[dict] = []

    async def send_invitation_email(
        self, to_address: Email, inviter_display_name: str, invitation_link: str
    ) -> EmailDeliveryOutcome:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        if self.fail:
            return EmailDeliveryOutcome(
                delivered=False, provider_error={"message": "Mock delivery failure"}
            )

        self.sent.append(
            {
                "to": to_address.root,
                "inviter": inviter_display_name,
                "link": invitation_link,
            }
        )
        return EmailDeliveryOutcome(
            delivered=True, provider_message_id=f"mock-{len(self.sent)}"
        )
