"""Tests for how the container wires settings into services."""

import pytest

from duo.adapter.resend import ResendInvitationMailer
from duo.config import EmailSettings, InvitationSettings
from duo.domain.service import InvitationMailer, InvitationService, PairingService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()
email_env = create_env_fixture(unmock={"email"})


class TestSettingsWiring:
    """Section settings are provided once and reach their consumers."""

    @pytest.mark.asyncio
    async def test_invitation_settings_reach_invitation_service(self, unit_env):
        invitation_settings = await unit_env.get(InvitationSettings)

        service = await unit_env.get(InvitationService)

        assert service.settings is invitation_settings
        assert service.accept_url.endswith(invitation_settings.accept_path)

    @pytest.mark.asyncio
    async def test_email_timeout_reaches_pairing_service(self, unit_env):
        email_settings = await unit_env.get(EmailSettings)

        service = await unit_env.get(PairingService)

        assert service.email_timeout_seconds == email_settings.timeout_seconds

    @pytest.mark.asyncio
    async def test_resend_mailer_uses_provided_settings(self, email_env):
        email_settings = await email_env.get(EmailSettings)
        invitation_settings = await email_env.get(InvitationSettings)

        mailer = await email_env.get(InvitationMailer)

        assert isinstance(mailer, ResendInvitationMailer)
        assert mailer.settings is email_settings
        assert mailer.expiry_days == invitation_settings.expiry_days


class TestInvitationMailerPort:
    def test_mailer_without_send_cannot_be_built(self):
        class SilentMailer(InvitationMailer):
            pass

        with pytest.raises(TypeError):
            SilentMailer()
