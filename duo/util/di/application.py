"""Application layer DI providers."""

from dishka import Scope, provide

from duo.application.usecase.couple import GetCoupleUseCase
from duo.application.usecase.invitation import (
    GetInvitationUseCase,
    ListReceivedInvitationsUseCase,
    ListSentInvitationsUseCase,
)
from duo.application.usecase.pairing import (
    AcceptInvitationUseCase,
    ConnectWithPartnerUseCase,
)
from duo.application.usecase.profile import GetProfileUseCase, UpdateProfileUseCase
from duo.domain.repository import UnitOfWork
from duo.domain.service import (
    CoupleService,
    InvitationService,
    PairingService,
    ProfileService,
)
from duo.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Pairing use cases
    @provide(scope=Scope.REQUEST)
    def get_connect_with_partner_use_case(
        self, pairing_service: PairingService
    ) -> ConnectWithPartnerUseCase:
        """Provide connect with partner use case."""
        return ConnectWithPartnerUseCase(pairing_service=pairing_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_invitation_use_case(
        self, pairing_service: PairingService
    ) -> AcceptInvitationUseCase:
        """Provide accept invitation use case."""
        return AcceptInvitationUseCase(pairing_service=pairing_service)

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_get_invitation_use_case(
        self, invitation_service: InvitationService, profile_service: ProfileService
    ) -> GetInvitationUseCase:
        """Provide get invitation use case."""
        return GetInvitationUseCase(
            invitation_service=invitation_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_sent_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ListSentInvitationsUseCase:
        """Provide list sent invitations use case."""
        return ListSentInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_received_invitations_use_case(
        self, invitation_service: InvitationService, profile_service: ProfileService
    ) -> ListReceivedInvitationsUseCase:
        """Provide list received invitations use case."""
        return ListReceivedInvitationsUseCase(
            invitation_service=invitation_service, profile_service=profile_service
        )

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService, unit_of_work: UnitOfWork
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(
            profile_service=profile_service, unit_of_work=unit_of_work
        )

    # Couple use cases
    @provide(scope=Scope.REQUEST)
    def get_get_couple_use_case(self, couple_service: CoupleService) -> GetCoupleUseCase:
        """Provide get couple use case."""
        return GetCoupleUseCase(couple_service=couple_service)
