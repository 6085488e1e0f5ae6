"""Domain layer DI providers."""

from dishka import Scope, provide

from duo.config import AuthSettings, EmailSettings, InvitationSettings, Settings
from duo.domain.repository import (
    CoupleRepository,
    InvitationRepository,
    ProfileRepository,
    UnitOfWork,
)
from duo.domain.service import (
    CoupleService,
    InvitationMailer,
    InvitationService,
    JWTService,
    PairingService,
    ProfileService,
)
from duo.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_couple_service(
        self,
        couple_repository: CoupleRepository,
        profile_repository: ProfileRepository,
    ) -> CoupleService:
        """Provide couple domain service."""
        return CoupleService(
            couple_repository=couple_repository,
            profile_repository=profile_repository,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
        settings: Settings,
    ) -> InvitationService:
        """Provide invitation domain service.

        Invitation links point at the frontend accept screen.
        """
        return InvitationService(
            invitation_repository=invitation_repository,
            settings=invitation_settings,
            accept_url=settings.invitation_accept_url,
        )

    @provide
    def get_pairing_service(
        self,
        profile_service: ProfileService,
        couple_service: CoupleService,
        invitation_service: InvitationService,
        mailer: InvitationMailer,
        unit_of_work: UnitOfWork,
        email_settings: EmailSettings,
    ) -> PairingService:
        """Provide pairing domain service."""
        return PairingService(
            profile_service=profile_service,
            couple_service=couple_service,
            invitation_service=invitation_service,
            mailer=mailer,
            unit_of_work=unit_of_work,
            email_timeout_seconds=email_settings.timeout_seconds,
        )
