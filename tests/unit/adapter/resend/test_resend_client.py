"""Tests for the Resend invitation mailer."""

import json

import httpx
import pytest

from duo.adapter.error import ProviderError
from duo.adapter.resend import ResendInvitationMailer
from duo.config import EmailSettings
from duo.domain.value import Email

LINK = "http://localhost:8081/accept-invitation?token=abc"


def make_mailer(handler, api_key: str | None = "re_test"):
    return ResendInvitationMailer(
        settings=EmailSettings(resend_api_key=api_key),
        expiry_days=7,
        transport=httpx.MockTransport(handler),
    )


class TestResendInvitationMailer:
    """Tests for ResendInvitationMailer."""

    @pytest.mark.asyncio
    async def test_successful_send(self):
        # Arrange
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"id": "msg_123"})

        mailer = make_mailer(handler)

        # Act
        outcome = await mailer.send_invitation_email(
            Email(root="partner@example.com"), "Alice", LINK
        )

        # Assert
        assert outcome.delivered is True
        assert outcome.provider_message_id == "msg_123"

        sent = requests[0]
        assert sent.headers["Authorization"] == "Bearer re_test"
        body = json.loads(sent.content)
        assert body["to"] == ["partner@example.com"]
        assert body["subject"] == "Alice invited you to Couple's Calendar"
        assert LINK in body["html"]

    @pytest.mark.asyncio
    async def test_rejected_send(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"message": "Invalid `to` field"})

        outcome = await make_mailer(handler).send_invitation_email(
            Email(root="partner@example.com"), "Alice", LINK
        )

        assert outcome.delivered is False
        assert outcome.provider_error == {"message": "Invalid `to` field"}

    @pytest.mark.asyncio
    async def test_unreachable_provider(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError):
            await make_mailer(handler).send_invitation_email(
                Email(root="partner@example.com"), "Alice", LINK
            )

    @pytest.mark.asyncio
    async def test_missing_api_key_skips_send(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"id": "msg_123"})

        outcome = await make_mailer(handler, api_key=None).send_invitation_email(
            Email(root="partner@example.com"), "Alice", LINK
        )

        assert outcome.delivered is False
        assert outcome.provider_error == "Email delivery is not configured"
        assert calls == []
