"""Invitation use cases."""

from duo.application.usecase.invitation.get_invitation import (
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
    InvalidReason,
)
from duo.application.usecase.invitation.list_invitations import (
    ListReceivedInvitationsRequest,
    ListReceivedInvitationsResponse,
    ListReceivedInvitationsUseCase,
    ListSentInvitationsRequest,
    ListSentInvitationsResponse,
    ListSentInvitationsUseCase,
)

__all__ = [
    "GetInvitationRequest",
    "GetInvitationResponse",
    "GetInvitationUseCase",
    "InvalidReason",
    "ListReceivedInvitationsRequest",
    "ListReceivedInvitationsResponse",
    "ListReceivedInvitationsUseCase",
    "ListSentInvitationsRequest",
    "ListSentInvitationsResponse",
    "ListSentInvitationsUseCase",
]
