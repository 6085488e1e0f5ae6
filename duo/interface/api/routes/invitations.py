"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from duo.application.usecase.invitation import (
    GetInvitationRequest,
    GetInvitationResponse,
    GetInvitationUseCase,
    ListReceivedInvitationsRequest,
    ListReceivedInvitationsResponse,
    ListReceivedInvitationsUseCase,
    ListSentInvitationsRequest,
    ListSentInvitationsResponse,
    ListSentInvitationsUseCase,
)
from duo.application.usecase.pairing import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
)
from duo.domain.service import JWTService
from duo.domain.value import InvitationStatus
from duo.interface.api.auth import authenticate

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


@router.get("", response_model=ListSentInvitationsResponse)
async def list_sent_invitations(
    list_sent_use_case: FromDishka[ListSentInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    status_filter: InvitationStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListSentInvitationsResponse:
    """List invitations sent by the signed-in user."""
    payload = authenticate(jwt_service, authorization)
    return await list_sent_use_case.execute(
        ListSentInvitationsRequest(
            user_id=payload.user_id,
            status=status_filter,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/received", response_model=ListReceivedInvitationsResponse)
async def list_received_invitations(
    list_received_use_case: FromDishka[ListReceivedInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListReceivedInvitationsResponse:
    """List pending invitations addressed to the signed-in user's email."""
    payload = authenticate(jwt_service, authorization)
    return await list_received_use_case.execute(
        ListReceivedInvitationsRequest(user_email=payload.email)
    )


@router.get("/{token}", response_model=GetInvitationResponse)
async def get_invitation(
    token: str,
    get_invitation_use_case: FromDishka[GetInvitationUseCase],
) -> GetInvitationResponse:
    """Check an invitation link before signing in.

    Public: unknown, expired and used tokens come back as ``valid=false``
    with a reason rather than an error status.
    """
    return await get_invitation_use_case.execute(GetInvitationRequest(token=token))


@router.post("/{token}/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    token: str,
    accept_use_case: FromDishka[AcceptInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> AcceptInvitationResponse:
    """Accept an invitation as the signed-in user.

    Errors:
        404: Unknown token or inviter no longer exists
        410: Invitation expired
        409: Invitation already used, or either user already paired
        403: Signed in with an email other than the invited one
    """
    payload = authenticate(jwt_service, authorization)
    return await accept_use_case.execute(
        AcceptInvitationRequest(
            token=token, user_id=payload.user_id, user_email=payload.email
        )
    )
