"""Pairing use cases."""

from duo.application.usecase.pairing.accept_invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from duo.application.usecase.pairing.connect_with_partner import (
    ConnectWithPartnerRequest,
    ConnectWithPartnerResponse,
    ConnectWithPartnerUseCase,
)

__all__ = [
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "AcceptInvitationUseCase",
    "ConnectWithPartnerRequest",
    "ConnectWithPartnerResponse",
    "ConnectWithPartnerUseCase",
]
